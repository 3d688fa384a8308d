from __future__ import annotations

import ast
import difflib
import os
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parents[2]
EXAMPLES_ROOT = REPO_ROOT / "examples"
SRC_ROOT = REPO_ROOT / "src"
_EXPECTED_MARKER = "# =>"


@dataclass(frozen=True, slots=True)
class ExampleCase:
    path: Path
    expected_lines: list[str]


def _expected_lines(path: Path) -> list[str]:
    """Collect the ``# =>`` expectation written on each ``print()`` closing line."""
    source = path.read_text(encoding="utf-8")
    source_lines = source.splitlines()
    print_calls = sorted(
        (
            node
            for node in ast.walk(ast.parse(source, filename=str(path)))
            if isinstance(node, ast.Call)
            and isinstance(node.func, ast.Name)
            and node.func.id == "print"
        ),
        key=lambda node: (node.lineno, node.col_offset),
    )

    expected: list[str] = []
    for call in print_calls:
        closing_line = source_lines[(call.end_lineno or call.lineno) - 1]
        if _EXPECTED_MARKER not in closing_line:
            msg = f"{path}:{call.lineno}: print() must end with '{_EXPECTED_MARKER} <output>'."
            raise AssertionError(msg)
        expected.append(closing_line.split(_EXPECTED_MARKER, maxsplit=1)[1].strip())
    return expected


def _cases() -> list[object]:
    cases: list[object] = []
    for topic_dir in sorted(p for p in EXAMPLES_ROOT.glob("ex_*") if p.is_dir()):
        for path in sorted(topic_dir.glob("01_*.py")):
            case = ExampleCase(path=path, expected_lines=_expected_lines(path))
            cases.append(pytest.param(case, id=str(path.relative_to(REPO_ROOT))))
    return cases


@pytest.mark.parametrize("case", _cases())
def test_example_stdout_matches_inline_expectations(case: ExampleCase) -> None:
    env = os.environ.copy()
    env["PYTHONPATH"] = os.pathsep.join(filter(None, (str(SRC_ROOT), env.get("PYTHONPATH"))))

    completed = subprocess.run(  # noqa: S603
        [sys.executable, str(case.path)],
        cwd=case.path.parent,
        env=env,
        capture_output=True,
        text=True,
        check=False,
    )
    actual_lines = completed.stdout.splitlines()

    if completed.returncode != 0 or actual_lines != case.expected_lines:
        diff = "\n".join(
            difflib.unified_diff(
                case.expected_lines,
                actual_lines,
                fromfile="expected",
                tofile="actual",
                lineterm="",
            ),
        )
        msg = (
            f"Example execution mismatch for {case.path}\n"
            f"returncode={completed.returncode}\n"
            f"stderr:\n{completed.stderr or '<empty>'}\n\n"
            f"diff:\n{diff or '<no diff>'}"
        )
        raise AssertionError(msg)
