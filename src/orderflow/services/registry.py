"""
Capability Registry - name-based lookup of interchangeable variants

Each capability (order, invoice, notifier) has a registry that maps a short
name to an implementation class. The built-in variants are registered at
import time; embedding applications register their own at startup and then
select them by name from system.yaml or the CLI.

Philosophy:
- Validate protocol compliance at registration time (fail fast)
- Look up by name, construct with keyword params from configuration

Usage:
    # Register a custom notifier
    notifier_registry.register("slack", SlackNotifier, metadata={"description": "Posts to Slack"})

    # List available variants
    print(notifier_registry.list_names())

    # Build one from configuration
    notifier = notifier_registry.create("slack", channel="#orders")
"""

from typing import Any, Generic, Type, TypeVar

from orderflow.services.invoice import FormatInvoiceService, IInvoiceGenerator, InvoiceService
from orderflow.services.notification import EmailService, IEmailNotifier, SmsService
from orderflow.services.order import IOrder, OrderProcessor, SurchargeOrderProcessor
from orderflow.system import LoggerFactory

logger = LoggerFactory.get_logger()

T = TypeVar("T")


class RegistryError(Exception):
    """Base exception for registry errors."""

    pass


class ComponentNotFoundError(RegistryError):
    """Component not found in registry."""

    pass


class DuplicateComponentError(RegistryError):
    """Component already registered with this name."""

    pass


class InvalidComponentError(RegistryError):
    """Component does not satisfy the capability protocol, or cannot be built."""

    pass


class BaseRegistry(Generic[T]):
    """
    Registry of implementations for one capability.

    Type Parameters:
        T: The capability protocol (e.g., IOrder)
    """

    def __init__(self, base_class: Type[T], component_type: str):
        """
        Initialize registry.

        Args:
            base_class: Runtime-checkable capability protocol
            component_type: Human-readable component type (e.g., "order")
        """
        self.base_class = base_class
        self.component_type = component_type
        self._registry: dict[str, Type[T]] = {}
        self._metadata: dict[str, dict[str, Any]] = {}

    def register(
        self,
        name: str,
        component_class: Type[T],
        metadata: dict[str, Any] | None = None,
        allow_override: bool = False,
    ) -> None:
        """
        Register a component class.

        Args:
            name: Component name (registry key)
            component_class: The component class
            metadata: Optional metadata (description, etc.)
            allow_override: Allow replacing existing component

        Raises:
            InvalidComponentError: If component does not implement the capability protocol
            DuplicateComponentError: If name already registered (and not allow_override)
        """
        if not isinstance(component_class, type) or not issubclass(component_class, self.base_class):
            component_name = getattr(component_class, "__name__", repr(component_class))
            raise InvalidComponentError(f"{component_name} does not implement {self.base_class.__name__}")

        if name in self._registry and not allow_override:
            raise DuplicateComponentError(
                f"{self.component_type} '{name}' already registered "
                f"({self._registry[name].__module__}.{self._registry[name].__name__})"
            )

        self._registry[name] = component_class
        self._metadata[name] = metadata or {}
        logger.debug("registry.registered", component_type=self.component_type, name=name)

    def unregister(self, name: str) -> None:
        """
        Remove a registered component.

        Raises:
            ComponentNotFoundError: If name not in registry
        """
        if name not in self._registry:
            raise ComponentNotFoundError(f"{self.component_type} '{name}' not found")

        del self._registry[name]
        del self._metadata[name]
        logger.debug("registry.unregistered", component_type=self.component_type, name=name)

    def get(self, name: str) -> Type[T]:
        """
        Get component class by name.

        Raises:
            ComponentNotFoundError: If name not in registry
        """
        if name not in self._registry:
            available = ", ".join(sorted(self._registry.keys()))
            raise ComponentNotFoundError(f"{self.component_type} '{name}' not found. Available: {available}")

        return self._registry[name]

    def create(self, name: str, **params: Any) -> T:
        """
        Instantiate a registered component.

        Args:
            name: Component name
            **params: Constructor keyword arguments

        Returns:
            New component instance

        Raises:
            ComponentNotFoundError: If name not in registry
            InvalidComponentError: If params don't match the constructor
        """
        component_class = self.get(name)
        try:
            return component_class(**params)
        except TypeError as e:
            raise InvalidComponentError(f"Cannot create {self.component_type} '{name}' with {params}: {e}") from e

    def list_names(self) -> list[str]:
        """Sorted list of registered component names."""
        return sorted(self._registry.keys())

    def list_components(self) -> dict[str, Type[T]]:
        """Dict mapping names to component classes."""
        return dict(self._registry)

    def get_metadata(self, name: str) -> dict[str, Any]:
        """
        Get metadata for a component.

        Raises:
            ComponentNotFoundError: If name not in registry
        """
        if name not in self._metadata:
            raise ComponentNotFoundError(f"{self.component_type} '{name}' not found")

        return dict(self._metadata[name])

    def __contains__(self, name: object) -> bool:
        return name in self._registry

    def __len__(self) -> int:
        return len(self._registry)


class OrderRegistry(BaseRegistry[IOrder]):
    """Registry for order variants."""

    def __init__(self) -> None:
        super().__init__(IOrder, "order")


class InvoiceRegistry(BaseRegistry[IInvoiceGenerator]):
    """Registry for invoice generator variants."""

    def __init__(self) -> None:
        super().__init__(IInvoiceGenerator, "invoice")


class NotifierRegistry(BaseRegistry[IEmailNotifier]):
    """Registry for notifier variants."""

    def __init__(self) -> None:
        super().__init__(IEmailNotifier, "notifier")


order_registry = OrderRegistry()
order_registry.register("standard", OrderProcessor, metadata={"description": "Total is price * quantity"})
order_registry.register(
    "surcharge",
    SurchargeOrderProcessor,
    metadata={"description": "Adds a proportional surcharge (param: surcharge_rate)"},
)

invoice_registry = InvoiceRegistry()
invoice_registry.register("pdf", InvoiceService, metadata={"description": "Reports the target name unchanged"})
invoice_registry.register(
    "format",
    FormatInvoiceService,
    metadata={"description": "Substitutes the file extension (param: extension)"},
)

notifier_registry = NotifierRegistry()
notifier_registry.register("email", EmailService, metadata={"description": "Email notification"})
notifier_registry.register("sms", SmsService, metadata={"description": "Text message notification"})
