from __future__ import annotations

import types
from typing import Annotated, Any, Literal, TypeGuard, TypeVar, Union, get_args, get_origin

_NONE_TYPE = type(None)


def is_runtime_class(candidate: object) -> TypeGuard[type[Any]]:
    """Return true when candidate is a runtime class safe for class-only operations.

    Args:
        candidate: Value being checked for eligibility or runtime type constraints.

    """
    return isinstance(candidate, type) and not isinstance(candidate, types.GenericAlias)


def is_assignable(value: object, annotation: Any) -> bool:
    """Return whether ``value`` fits a field declared as ``annotation``.

    Unions accept a value matching any member, parametrized generics are
    checked against their origin class, and ``NewType`` aliases against their
    supertype. Annotations that carry no runtime-checkable class (``Any``,
    unbound type variables, unresolved strings, protocols without
    ``@runtime_checkable``) accept every value.

    Args:
        value: Resolved dependency about to be assigned.
        annotation: Declared field type with ``Annotated`` metadata stripped.

    """
    if annotation is Any or annotation is object:
        return True
    if annotation is None or annotation is _NONE_TYPE:
        return value is None

    origin = get_origin(annotation)
    if origin is Annotated:
        return is_assignable(value, get_args(annotation)[0])
    if origin is Union or origin is types.UnionType:
        return any(is_assignable(value, member) for member in get_args(annotation))
    if origin is Literal:
        return value in get_args(annotation)
    if origin is not None:
        return is_assignable(value, origin)

    if isinstance(annotation, TypeVar):
        if annotation.__bound__ is not None:
            return is_assignable(value, annotation.__bound__)
        if annotation.__constraints__:
            return any(is_assignable(value, c) for c in annotation.__constraints__)
        return True

    supertype = getattr(annotation, "__supertype__", None)
    if supertype is not None:
        return is_assignable(value, supertype)

    if is_runtime_class(annotation):
        try:
            return isinstance(value, annotation)
        except TypeError:
            # non runtime-checkable protocol
            return True
    return True


__all__ = ["is_assignable", "is_runtime_class"]
