"""Order manager: runs an order through the injected capabilities."""

from orderflow.services.invoice import IInvoiceGenerator
from orderflow.services.manager.validation import OrderValidator, ValidationError
from orderflow.services.notification import IEmailNotifier
from orderflow.services.order import IOrder
from orderflow.services.registry import invoice_registry, notifier_registry, order_registry
from orderflow.system import ComponentsConfig, LoggerFactory

logger = LoggerFactory.get_logger()


class OrderManager:
    """
    Orchestrates order processing across three capabilities.

    Depends only on the capability protocols. Which variants run is decided
    by whoever constructs the manager (directly, or via from_config()).

    Attributes:
        order: Order capability (pricing and placement)
        invoice_generator: Invoice capability
        email_notifier: Notification capability

    Example:
        >>> manager = OrderManager(OrderProcessor(), InvoiceService(), EmailService())
        >>> manager.process_order(10.0, 2, "John Doe", "123 Main St", "order_123.pdf", "johndoe@example.com")
    """

    def __init__(
        self,
        order: IOrder,
        invoice_generator: IInvoiceGenerator,
        email_notifier: IEmailNotifier,
        validator: OrderValidator | None = None,
    ) -> None:
        self._order = order
        self._invoice_generator = invoice_generator
        self._email_notifier = email_notifier
        self._validator = validator or OrderValidator()

        logger.debug(
            "manager.initialized",
            order=type(order).__name__,
            invoice_generator=type(invoice_generator).__name__,
            email_notifier=type(email_notifier).__name__,
            validation=self._validator.policy,
        )

    @classmethod
    def from_config(cls, config: ComponentsConfig) -> "OrderManager":
        """
        Factory method to create the manager from configuration.

        Each capability is resolved by name from its registry and built with
        the configured params.

        Args:
            config: Components section of SystemConfig

        Returns:
            Wired OrderManager

        Raises:
            ComponentNotFoundError: If a configured name is not registered
            InvalidComponentError: If configured params don't fit the variant

        Example:
            >>> config = ComponentsConfig(notifier=ComponentSpec(name="sms"))
            >>> manager = OrderManager.from_config(config)
        """
        return cls(
            order=order_registry.create(config.order.name, **config.order.params),
            invoice_generator=invoice_registry.create(config.invoice.name, **config.invoice.params),
            email_notifier=notifier_registry.create(config.notifier.name, **config.notifier.params),
            validator=OrderValidator(config.validation),
        )

    @property
    def order(self) -> IOrder:
        return self._order

    @property
    def invoice_generator(self) -> IInvoiceGenerator:
        return self._invoice_generator

    @property
    def email_notifier(self) -> IEmailNotifier:
        return self._email_notifier

    @property
    def validator(self) -> OrderValidator:
        return self._validator

    def process_order(
        self,
        price: float,
        quantity: int,
        customer_name: str,
        address: str,
        invoice_target: str,
        destination: str,
    ) -> None:
        """
        Process one order through all four steps.

        Validation (strict policy only) happens before the first step, so
        either every step runs or none does.

        Raises:
            ValidationError: Strict policy rejected the input
        """
        try:
            self._validator.validate(price, quantity, address, invoice_target)
        except ValidationError as e:
            logger.warning("manager.validation_failed", field=e.field, value=e.value, error=str(e))
            raise

        logger.info("manager.order_processing", customer_name=customer_name, quantity=quantity)

        self._order.calculate_total(price, quantity)
        self._order.place_order(customer_name, address)
        self._invoice_generator.generate_invoice(invoice_target)
        self._email_notifier.send_notification(destination)

        logger.info("manager.order_processed", customer_name=customer_name, destination=destination)
