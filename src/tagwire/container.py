from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Literal, TypeVar, overload

from tagwire.exceptions import (
    TagwireDependencyNotFoundError,
    TagwireFactoryNotFoundError,
    TagwireInvalidConsumerError,
    TagwireInvalidRegistrationError,
    TagwireTypeMismatchError,
)
from tagwire.fields import InjectionPoint, InjectionPointsExtractor, is_frozen_dataclass
from tagwire.registry import BindingsRegistry, Factory
from tagwire.type_checks import is_assignable, is_runtime_class

T = TypeVar("T")
F = TypeVar("F", bound=Callable[[], Any])

logger = logging.getLogger(__name__)


class Container:
    """Hold named bindings and inject them into tagged consumer fields.

    Two registries live side by side. Singletons map a name to one shared
    value, factories map a name to a zero-argument callable invoked on every
    resolution. The two namespaces are independent.

    ``ensure`` walks the fields of a consumer instance and assigns each tagged
    field from the matching registry. Tags are attached either with
    ``Annotated[T, Inject("name")]`` or with dataclass
    ``field(metadata={"di": "name"})``; adding a ``prototype`` token selects the
    factory registry.

    Examples:
        .. code-block:: python

            container = Container()
            container.add_singleton("db", connection)
            container.add_factory("b", B)


            @dataclass
            class A:
                db: Annotated[Connection | None, Inject("db")] = None
                b: Annotated[B | None, Inject("b,prototype")] = None


            a = container.ensure(A())

    """

    def __init__(self) -> None:
        self._singletons: BindingsRegistry[Any] = BindingsRegistry("singleton")
        self._factories: BindingsRegistry[Factory] = BindingsRegistry("factory")
        self._injection_points_extractor = InjectionPointsExtractor()

    # region Registration Methods
    def add_singleton(self, name: str, value: Any) -> None:
        """Register a shared value under ``name``.

        Re-registering a name replaces the previous value for every later
        resolution. Fields injected before the replacement keep the old value.

        Raises:
            TagwireInvalidRegistrationError: If ``name`` is not a non-empty string.

        """
        self._validate_name(name)
        self._singletons.set(name, value)

    @overload
    def add_factory(self, name: str, factory: F) -> None: ...

    @overload
    def add_factory(
        self,
        name: str,
        factory: Literal["from_decorator"] = "from_decorator",
    ) -> FactoryRegistrationDecorator: ...

    def add_factory(
        self,
        name: str,
        factory: Factory | Literal["from_decorator"] = "from_decorator",
    ) -> None | FactoryRegistrationDecorator:
        """Register a zero-argument factory under ``name``.

        Supports direct calls and decorator form. The factory is called once per
        resolution; a factory signals failure by raising, and returning ``None``
        counts as a missing dependency during ``ensure``.

        Returns:
            ``None`` in direct mode or a decorator in decorator mode.

        Raises:
            TagwireInvalidRegistrationError: If ``name`` is not a non-empty string
                or ``factory`` is not callable.

        Examples:
            .. code-block:: python

                container.add_factory("b", B)


                @container.add_factory("session")
                def build_session() -> Session:
                    return Session(timeout=5)

        """
        self._validate_name(name)
        decorator = FactoryRegistrationDecorator(container=self, name=name)
        if factory == "from_decorator":
            return decorator
        decorator(factory)
        return None

    def _add_factory(self, name: str, factory: Factory) -> None:
        if not callable(factory):
            msg = f"Factory registered as '{name}' must be callable, got {factory!r}."
            raise TagwireInvalidRegistrationError(msg)
        self._factories.set(name, factory)

    def _validate_name(self, name: object) -> None:
        if not isinstance(name, str) or not name.strip():
            msg = f"Binding name must be a non-empty string, got {name!r}."
            raise TagwireInvalidRegistrationError(msg)

    # endregion Registration Methods

    # region Lookup Methods
    def get_singleton(self, name: str) -> Any | None:
        """Return the shared value registered under ``name``, or ``None``."""
        return self._singletons.get(name)

    def invoke_factory(self, name: str) -> Any:
        """Call the factory registered under ``name`` and return its result.

        Exceptions raised by the factory propagate unchanged. Nothing is cached.

        Raises:
            TagwireFactoryNotFoundError: If no factory is registered under ``name``.

        """
        factory = self._factories.get(name)
        if factory is None:
            raise TagwireFactoryNotFoundError(name)
        return factory()

    def has_singleton(self, name: str) -> bool:
        return name in self._singletons

    def has_factory(self, name: str) -> bool:
        return name in self._factories

    # endregion Lookup Methods

    # region Injection
    def ensure(self, consumer: T) -> T:
        """Inject every tagged field of ``consumer`` in place.

        Fields are processed in declaration order. The first failure aborts the
        call; fields assigned before it keep their new values. Untagged fields
        are never touched.

        Args:
            consumer: The instance to populate. Its class must be mutable.

        Returns:
            The same ``consumer`` object.

        Raises:
            TagwireInvalidConsumerError: If ``consumer`` is a class, a frozen
                dataclass instance, or a field carries a malformed tag.
            TagwireFactoryNotFoundError: If a prototype field names no factory.
            TagwireDependencyNotFoundError: If a field resolves to ``None``.
            TagwireTypeMismatchError: If a value does not fit its field type.

        """
        if is_runtime_class(consumer):
            msg = f"Expected an instance to inject into, got class '{consumer.__qualname__}'."
            raise TagwireInvalidConsumerError(msg)
        if is_frozen_dataclass(consumer):
            msg = f"Cannot inject into frozen dataclass '{type(consumer).__qualname__}'."
            raise TagwireInvalidConsumerError(msg)

        points = self._injection_points_extractor.get_injection_points(type(consumer))
        for point in points:
            try:
                value = self._resolve(point)
            except Exception:
                logger.debug(
                    "Failed to inject '%s' into %s.%s",
                    point.tag.name,
                    type(consumer).__qualname__,
                    point.field_name,
                )
                raise
            setattr(consumer, point.field_name, value)
            logger.debug(
                "Injected %s '%s' into %s.%s",
                point.tag.lifetime.value,
                point.tag.name,
                type(consumer).__qualname__,
                point.field_name,
            )
        return consumer

    def _resolve(self, point: InjectionPoint) -> Any:
        name = point.tag.name
        if point.tag.is_prototype:
            value = self.invoke_factory(name)
        else:
            value = self.get_singleton(name)

        if value is None:
            raise TagwireDependencyNotFoundError(name, point.field_name)
        if not is_assignable(value, point.annotation):
            raise TagwireTypeMismatchError(name, point.field_name, point.annotation, type(value))
        return value

    # endregion Injection

    # region Diagnostics
    def dump(self) -> str:
        """Render registered bindings for debugging.

        The output format is informal and may change between releases.
        """
        lines = ["singletons:"]
        for name, value in sorted(self._singletons.snapshot().items()):
            lines.append(f"  {name}: {_describe_type(type(value))}")
        lines.append("factories:")
        for name, factory in sorted(self._factories.snapshot().items()):
            lines.append(f"  {name}: {_describe_factory(factory)}")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.dump()

    # endregion Diagnostics


@dataclass(slots=True, kw_only=True)
class FactoryRegistrationDecorator:
    """A decorator for registering factories in the container."""

    container: Container
    name: str

    def __call__(self, factory: F) -> F:
        """Register the factory in the container."""
        self.container._add_factory(self.name, factory)  # noqa: SLF001
        return factory


def _describe_type(value_type: Any) -> str:
    if is_runtime_class(value_type):
        if value_type.__module__ == "builtins":
            return value_type.__qualname__
        return f"{value_type.__module__}.{value_type.__qualname__}"
    return repr(value_type)


def _describe_factory(factory: Factory) -> str:
    factory_name = getattr(factory, "__qualname__", None) or type(factory).__qualname__
    return_type = getattr(factory, "__annotations__", {}).get("return")
    if is_runtime_class(factory):
        return_type = factory
    if return_type is None:
        return factory_name
    if isinstance(return_type, str):
        return f"{factory_name} -> {return_type}"
    return f"{factory_name} -> {_describe_type(return_type)}"


__all__ = ["Container", "FactoryRegistrationDecorator"]
