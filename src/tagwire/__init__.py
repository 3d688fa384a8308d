from tagwire.container import Container
from tagwire.exceptions import (
    TagwireDependencyNotFoundError,
    TagwireError,
    TagwireFactoryExecutionError,
    TagwireFactoryNotFoundError,
    TagwireInvalidConsumerError,
    TagwireInvalidRegistrationError,
    TagwireTypeMismatchError,
)
from tagwire.markers import Inject, InjectionTag, Lifetime

__all__ = [
    "Container",
    "Inject",
    "InjectionTag",
    "Lifetime",
    "TagwireDependencyNotFoundError",
    "TagwireError",
    "TagwireFactoryExecutionError",
    "TagwireFactoryNotFoundError",
    "TagwireInvalidConsumerError",
    "TagwireInvalidRegistrationError",
    "TagwireTypeMismatchError",
]
