"""Diagnostics: render registered bindings with ``dump``."""

from __future__ import annotations

from tagwire import Container


class Session:
    pass


def build_session() -> Session:
    return Session()


def main() -> None:
    container = Container()
    container.add_singleton("retries", 3)
    container.add_factory("session", build_session)

    lines = container.dump().splitlines()
    print(lines[0])  # => singletons:
    print(lines[1].strip())  # => retries: int
    print(lines[2])  # => factories:
    print(lines[3].strip())  # => session: build_session -> Session


if __name__ == "__main__":
    main()
