"""Tag syntax: dataclass metadata and ``Annotated`` markers.

Tags are comma-separated: the first token names the binding and a
``prototype`` token selects the factory. Untagged fields are left alone.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Annotated

from tagwire import Container, Inject


class Cache:
    pass


class Request:
    pass


@dataclass
class Handler:
    cache: Cache | None = field(default=None, metadata={"di": "cache"})
    request: Annotated[Request | None, Inject("request,prototype")] = None
    name: str = "handler"


class LegacyHandler:
    cache: Annotated[Cache | None, Inject("cache")] = None


def main() -> None:
    container = Container()
    container.add_singleton("cache", Cache())
    container.add_factory("request", Request)

    handler = container.ensure(Handler())
    print(f"metadata_tag={handler.cache is container.get_singleton('cache')}")  # => metadata_tag=True
    print(f"annotated_tag={isinstance(handler.request, Request)}")  # => annotated_tag=True
    print(f"untagged={handler.name}")  # => untagged=handler

    legacy = container.ensure(LegacyHandler())
    print(f"plain_class={legacy.cache is handler.cache}")  # => plain_class=True


if __name__ == "__main__":
    main()
