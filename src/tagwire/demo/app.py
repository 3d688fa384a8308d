from __future__ import annotations

import argparse
import logging
import sqlite3
from contextlib import closing

from tagwire.container import Container
from tagwire.demo.components import A, B
from tagwire.demo.settings import LOG_LEVELS, DemoSettings, ValidationError
from tagwire.exceptions import TagwireError

logger = logging.getLogger(__name__)
_DESCRIPTION = "Open a database, wire it into a consumer and print what was injected."


def build_container(connection: sqlite3.Connection) -> Container:
    container = Container()
    container.add_singleton("db", connection)
    container.add_factory("b", B)
    return container


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="python -m tagwire.demo", description=_DESCRIPTION)
    parser.add_argument("--database", help="SQLite database path (default: from settings).")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level name (default: from settings).",
    )
    parser.add_argument(
        "--dump",
        action="store_true",
        help="Print registered bindings before injecting.",
    )
    args = parser.parse_args(argv)

    try:
        settings = DemoSettings()
    except ValidationError as e:
        print(f"error: invalid settings: {e}")
        return 1

    database = args.database or settings.database
    logging.basicConfig(level=args.log_level or settings.log_level)

    try:
        connection = sqlite3.connect(database)
    except sqlite3.Error as e:
        print(f"error: {e}")
        return 1

    with closing(connection):
        container = build_container(connection)
        if args.dump:
            print(container.dump())

        try:
            a = container.ensure(A())
        except TagwireError as e:
            print(f"error: {e}")
            return 1

        logger.debug("Consumer populated from database '%s'", database)
        print(f"db0: {id(a.db0):#x}")
        print(f"db1: {id(a.db1):#x}")
        print(f"b0: {id(a.b0):#x}")
        print(f"b1: {id(a.b1):#x}")
        print(f"db0 is db1: {a.db0 is a.db1}")
        print(f"b0 is b1: {a.b0 is a.b1}")
        print(f"version: {a.version()}")
    return 0
