from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Annotated, Any, NamedTuple, get_args, get_origin

if TYPE_CHECKING:
    from typing_extensions import Self

TAG_METADATA_KEY = "di"
"""Dataclass ``field(metadata=...)`` key holding an injection tag."""

PROTOTYPE_TOKEN = "prototype"
_TAG_SEPARATOR = ","


class Lifetime(str, Enum):
    """Defines how a tagged field obtains its value."""

    SINGLETON = "singleton"
    """The shared value registered with ``add_singleton`` is injected."""

    PROTOTYPE = "prototype"
    """The factory registered with ``add_factory`` is called for every injection."""


class Inject(NamedTuple):
    """Attach an injection tag to a field through ``typing.Annotated``.

    The tag is a comma-separated string: the first token names the binding,
    and a ``prototype`` token among the others selects a fresh factory-built
    value instead of the shared singleton.

    Examples:
        .. code-block:: python

            @dataclass
            class Handler:
                db: Annotated[Connection | None, Inject("db")] = None
                builder: Annotated[Builder | None, Inject("builder,prototype")] = None

    """

    tag: str


@dataclass(frozen=True, slots=True)
class InjectionTag:
    """A parsed injection tag."""

    name: str
    lifetime: Lifetime = Lifetime.SINGLETON

    @property
    def is_prototype(self) -> bool:
        return self.lifetime is Lifetime.PROTOTYPE

    @classmethod
    def parse(cls, raw: str | None) -> Self | None:
        """Parse a raw tag string.

        Returns ``None`` for a missing or empty tag and for a tag whose first
        token is empty, meaning the field is not injected. Tokens are compared
        verbatim: only an exact ``prototype`` token after the first selects the
        prototype lifetime, so ``"b, prototype"`` stays a singleton.
        """
        if not raw:
            return None
        tokens = raw.split(_TAG_SEPARATOR)
        name = tokens[0]
        if not name:
            return None
        if PROTOTYPE_TOKEN in tokens[1:]:
            return cls(name=name, lifetime=Lifetime.PROTOTYPE)
        return cls(name=name)


def inject_marker_of(annotation: Any) -> Inject | None:
    """Return the first ``Inject`` marker carried by an ``Annotated`` hint."""
    if get_origin(annotation) is not Annotated:
        return None
    for metadata in get_args(annotation)[1:]:
        if isinstance(metadata, Inject):
            return metadata
    return None


def strip_annotated(annotation: Any) -> Any:
    """Return the underlying type of an ``Annotated`` hint."""
    if get_origin(annotation) is Annotated:
        return get_args(annotation)[0]
    return annotation


__all__ = [
    "PROTOTYPE_TOKEN",
    "TAG_METADATA_KEY",
    "Inject",
    "InjectionTag",
    "Lifetime",
    "inject_marker_of",
    "strip_annotated",
]
