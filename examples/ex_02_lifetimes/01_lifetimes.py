"""Lifetimes: ``singleton`` and ``prototype``.

See how object identity differs between fields and across repeated ``ensure``
calls, and how re-registering a singleton only affects later injections.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from tagwire import Container


class Connection:
    pass


class Worker:
    pass


@dataclass
class Pool:
    primary: Connection | None = field(default=None, metadata={"di": "conn"})
    replica: Connection | None = field(default=None, metadata={"di": "conn"})
    first: Worker | None = field(default=None, metadata={"di": "worker,prototype"})
    second: Worker | None = field(default=None, metadata={"di": "worker,prototype"})


def main() -> None:
    container = Container()
    container.add_singleton("conn", Connection())
    container.add_factory("worker", Worker)

    pool = container.ensure(Pool())
    print(f"singleton_same={pool.primary is pool.replica}")  # => singleton_same=True
    print(f"prototype_distinct={pool.first is not pool.second}")  # => prototype_distinct=True

    previous_worker = pool.first
    container.ensure(pool)
    print(f"prototype_rebuilt={pool.first is not previous_worker}")  # => prototype_rebuilt=True

    old_connection = pool.primary
    new_connection = Connection()
    container.add_singleton("conn", new_connection)
    print(f"already_injected_kept={pool.primary is old_connection}")  # => already_injected_kept=True

    container.ensure(pool)
    print(f"next_ensure_updated={pool.primary is new_connection}")  # => next_ensure_updated=True


if __name__ == "__main__":
    main()
