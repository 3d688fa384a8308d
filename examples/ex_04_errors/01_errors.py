"""Errors: every failure aborts ``ensure`` and reaches the caller.

Factory exceptions are not wrapped, and fields handled before the failure
keep their new values.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from tagwire import (
    Container,
    TagwireDependencyNotFoundError,
    TagwireFactoryExecutionError,
    TagwireFactoryNotFoundError,
    TagwireTypeMismatchError,
)


class Mailer:
    pass


class Client:
    pass


@dataclass
class Notifier:
    mailer: Mailer | None = field(default=None, metadata={"di": "mailer"})
    client: Client | None = field(default=None, metadata={"di": "client,prototype"})


def main() -> None:
    container = Container()

    try:
        container.ensure(Notifier())
    except TagwireDependencyNotFoundError as error:
        print(f"missing={error.name}")  # => missing=mailer

    container.add_singleton("mailer", "not a mailer")
    try:
        container.ensure(Notifier())
    except TagwireTypeMismatchError as error:
        print(f"mismatch={error.actual.__name__}")  # => mismatch=str

    container.add_singleton("mailer", Mailer())
    try:
        container.ensure(Notifier())
    except TagwireFactoryNotFoundError as error:
        print(f"no_factory={error.name}")  # => no_factory=client

    def build_client() -> Client:
        msg = "handshake failed"
        raise TagwireFactoryExecutionError(msg)

    container.add_factory("client", build_client)
    notifier = Notifier()
    try:
        container.ensure(notifier)
    except TagwireFactoryExecutionError as error:
        print(f"factory_failed={error}")  # => factory_failed=handshake failed
    print(f"partial={notifier.mailer is not None and notifier.client is None}")  # => partial=True


if __name__ == "__main__":
    main()
