from __future__ import annotations

import builtins
import dataclasses
import inspect
import sys
from dataclasses import dataclass
from typing import Any, ClassVar, ForwardRef, get_origin

from tagwire.exceptions import TagwireInvalidConsumerError
from tagwire.markers import (
    TAG_METADATA_KEY,
    InjectionTag,
    inject_marker_of,
    strip_annotated,
)

if sys.version_info >= (3, 14):
    from annotationlib import Format, get_annotations

    def _own_annotations(owner: type[Any]) -> dict[str, Any]:
        return dict(get_annotations(owner, format=Format.FORWARDREF))

else:

    def _own_annotations(owner: type[Any]) -> dict[str, Any]:
        return dict(inspect.get_annotations(owner))


_EVALUATION_ERRORS = (AttributeError, NameError, SyntaxError, TypeError)


@dataclass(frozen=True, slots=True)
class InjectionPoint:
    """A consumer field that receives a dependency."""

    field_name: str
    annotation: Any
    tag: InjectionTag


class _LenientNamespace(dict):  # type: ignore[type-arg]
    """Evaluation namespace that reads unknown names as ``Any``."""

    def __missing__(self, key: str) -> Any:
        return Any


class InjectionPointsExtractor:
    """Extract tagged fields from consumer types.

    Fields are reported in declaration order, base classes first. Results are
    cached per consumer type.

    Tags are located before any annotation is evaluated: dataclass metadata is
    read directly and ``Annotated`` markers are read from the raw class
    annotations. Only tagged fields have their string annotations evaluated,
    so untagged fields may name types imported under ``TYPE_CHECKING``.
    """

    def __init__(self) -> None:
        self._cache: dict[type[Any], tuple[InjectionPoint, ...]] = {}

    def get_injection_points(self, consumer_type: type[Any]) -> tuple[InjectionPoint, ...]:
        cached = self._cache.get(consumer_type)
        if cached is not None:
            return cached

        metadata_tags = self._get_dataclass_metadata_tags(consumer_type)

        points: list[InjectionPoint] = []
        for field_name, (owner, raw_hint) in self._collect_raw_hints(consumer_type).items():
            point = self._get_injection_point(
                owner,
                field_name,
                raw_hint,
                metadata_tags.get(field_name),
            )
            if point is not None:
                points.append(point)

        result = tuple(points)
        self._cache[consumer_type] = result
        return result

    def _get_injection_point(
        self,
        owner: type[Any],
        field_name: str,
        raw_hint: Any,
        metadata_tag: str | None,
    ) -> InjectionPoint | None:
        source = _annotation_source(raw_hint)

        if metadata_tag is not None:
            tag = InjectionTag.parse(metadata_tag)
            if tag is None:
                return None
            hint = raw_hint if source is None else self._evaluate_or_any(owner, source)
        elif source is None:
            hint = raw_hint
            tag = _parse_marker(hint)
        elif "Inject" not in source:
            return None
        else:
            try:
                hint = _evaluate(owner, source)
            except _EVALUATION_ERRORS as e:
                msg = (
                    f"Cannot evaluate the annotation of field "
                    f"'{owner.__qualname__}.{field_name}': {e}"
                )
                raise TagwireInvalidConsumerError(msg) from e
            tag = _parse_marker(hint)

        if tag is None or get_origin(strip_annotated(hint)) is ClassVar:
            return None
        return InjectionPoint(field_name=field_name, annotation=strip_annotated(hint), tag=tag)

    def _evaluate_or_any(self, owner: type[Any], source: str) -> Any:
        try:
            return _evaluate(owner, source)
        except _EVALUATION_ERRORS:
            return Any

    def _collect_raw_hints(self, consumer_type: type[Any]) -> dict[str, tuple[type[Any], Any]]:
        raw_hints: dict[str, tuple[type[Any], Any]] = {}
        for owner in reversed(consumer_type.__mro__):
            if owner is object:
                continue
            for field_name, raw_hint in _own_annotations(owner).items():
                raw_hints[field_name] = (owner, raw_hint)
        return raw_hints

    def _get_dataclass_metadata_tags(self, consumer_type: type[Any]) -> dict[str, str]:
        if not dataclasses.is_dataclass(consumer_type):
            return {}
        tags: dict[str, str] = {}
        for field in dataclasses.fields(consumer_type):
            if TAG_METADATA_KEY not in field.metadata:
                continue
            raw_tag = field.metadata[TAG_METADATA_KEY]
            if not isinstance(raw_tag, str):
                msg = (
                    f"Field '{consumer_type.__qualname__}.{field.name}' has a "
                    f"'{TAG_METADATA_KEY}' metadata value of type "
                    f"'{type(raw_tag).__qualname__}'; expected a tag string."
                )
                raise TagwireInvalidConsumerError(msg)
            tags[field.name] = raw_tag
        return tags


def _annotation_source(raw_hint: Any) -> str | None:
    if isinstance(raw_hint, str):
        return raw_hint
    if isinstance(raw_hint, ForwardRef):
        return raw_hint.__forward_arg__
    return None


def _parse_marker(hint: Any) -> InjectionTag | None:
    marker = inject_marker_of(hint)
    return InjectionTag.parse(marker.tag if marker is not None else None)


def _evaluate(owner: type[Any], source: str) -> Any:
    module = sys.modules.get(owner.__module__)
    module_globals = vars(module) if module is not None else {}

    namespace = _LenientNamespace(vars(builtins))
    namespace.update(module_globals)
    namespace.update(vars(owner))
    return eval(source, module_globals, namespace)  # noqa: S307


def is_frozen_dataclass(consumer: object) -> bool:
    params = getattr(type(consumer), "__dataclass_params__", None)
    return bool(params is not None and params.frozen)


__all__ = ["InjectionPoint", "InjectionPointsExtractor", "is_frozen_dataclass"]
