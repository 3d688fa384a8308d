"""Quickstart: register bindings and ``ensure`` a consumer.

A singleton is shared by every field that names it, a prototype field gets a
fresh value from its factory.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from tagwire import Container


class Database:
    pass


class Report:
    pass


@dataclass
class ReportJob:
    db: Database | None = field(default=None, metadata={"di": "db"})
    report: Report | None = field(default=None, metadata={"di": "report,prototype"})


def main() -> None:
    database = Database()

    container = Container()
    container.add_singleton("db", database)
    container.add_factory("report", Report)

    job = container.ensure(ReportJob())

    print(f"db_is_shared={job.db is database}")  # => db_is_shared=True
    print(f"report_built={isinstance(job.report, Report)}")  # => report_built=True


if __name__ == "__main__":
    main()
