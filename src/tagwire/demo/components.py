from __future__ import annotations

import sqlite3
from dataclasses import dataclass, field


class B:
    pass


@dataclass
class A:
    db0: sqlite3.Connection | None = field(default=None, metadata={"di": "db"})
    db1: sqlite3.Connection | None = field(default=None, metadata={"di": "db"})
    b0: B | None = field(default=None, metadata={"di": "b,prototype"})
    b1: B | None = field(default=None, metadata={"di": "b,prototype"})

    def version(self) -> str:
        """Return the version reported by the injected database."""
        if self.db0 is None:
            msg = "A.db0 has not been injected"
            raise RuntimeError(msg)
        row = self.db0.execute("SELECT sqlite_version()").fetchone()
        return str(row[0])
