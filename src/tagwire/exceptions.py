from __future__ import annotations

from typing import Any


class TagwireError(Exception):
    """Represent a base class for all tagwire-specific failures.

    Catch this type when you want to handle any tagwire error path without
    matching each concrete exception class individually.
    """


class TagwireInvalidRegistrationError(TagwireError):
    """Signal an invalid binding registration.

    Raised by ``Container.add_singleton`` and ``Container.add_factory`` when the
    binding name is not a non-empty string, and by ``Container.add_factory``
    when the factory is not callable.
    """


class TagwireInvalidConsumerError(TagwireError):
    """Signal that an object cannot receive field injection.

    Raised by ``Container.ensure`` when it is given a class instead of an
    instance, a frozen dataclass instance, a dataclass field whose ``di``
    metadata value is not a string, or an ``Inject`` marker written in a string
    annotation that cannot be evaluated.

    Typical fixes include passing an instance created by the caller, dropping
    ``frozen=True`` from the dataclass, or writing the tag as a string such as
    ``field(metadata={"di": "db"})``.
    """


class TagwireFactoryNotFoundError(TagwireError):
    """Signal that no factory is registered under a binding name.

    Raised by ``Container.invoke_factory`` and by ``Container.ensure`` for
    fields tagged with the ``prototype`` policy.

    Typical fix is calling ``container.add_factory(name, factory)`` before
    resolution, or dropping ``prototype`` from the tag when the binding is a
    shared singleton.
    """

    def __init__(self, name: str) -> None:
        super().__init__(f"Factory '{name}' is not registered.")
        self.name = name


class TagwireDependencyNotFoundError(TagwireError):
    """Signal that a tagged field resolved to nothing.

    Raised by ``Container.ensure`` when a singleton-policy field names a binding
    that was never registered, or when a factory returned ``None``.
    """

    def __init__(self, name: str, field_name: str) -> None:
        super().__init__(f"Dependency '{name}' not found (required by field '{field_name}').")
        self.name = name
        self.field_name = field_name


class TagwireFactoryExecutionError(TagwireError):
    """Base class factories may raise to report a failed build.

    The container never wraps factory exceptions: whatever a factory raises,
    this class or any other, reaches the caller of ``Container.ensure`` or
    ``Container.invoke_factory`` unchanged.
    """


class TagwireTypeMismatchError(TagwireError):
    """Signal that a resolved value does not fit the field's declared type.

    Raised by ``Container.ensure`` before the assignment happens. Values are
    never coerced.

    Typical fixes include registering a value of the annotated type or widening
    the field annotation.
    """

    def __init__(self, name: str, field_name: str, expected: Any, actual: type[Any]) -> None:
        expected_name = getattr(expected, "__qualname__", repr(expected))
        super().__init__(
            f"Dependency '{name}' of type '{actual.__qualname__}' cannot be assigned to "
            f"field '{field_name}' declared as '{expected_name}'.",
        )
        self.name = name
        self.field_name = field_name
        self.expected = expected
        self.actual = actual
