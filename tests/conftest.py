from __future__ import annotations

from pathlib import Path

import pytest

from tests._support.machines import INCREMENT_PROGRAM


@pytest.fixture
def machine_files(tmp_path: Path):
    """Write alphabet/tape/program files and return their paths."""

    def _write(alphabet: str = "0 1\n", tape: str = "1011\n", program: str = INCREMENT_PROGRAM):
        paths = {
            "alphabet": tmp_path / "alphabet",
            "tape": tmp_path / "tape",
            "program": tmp_path / "program",
        }
        paths["alphabet"].write_text(alphabet, encoding="utf-8")
        paths["tape"].write_text(tape, encoding="utf-8")
        paths["program"].write_text(program, encoding="utf-8")
        return paths

    return _write
