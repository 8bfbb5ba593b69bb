from __future__ import annotations

from pathlib import Path

import pytest

from simulator.alphabet import BLANK, parse_alphabet
from simulator.errors import UnknownSymbol
from simulator.tape import Tape, load_tape, parse_tape


def test_move_left_from_zero_prepends_one_blank() -> None:
    tape = Tape.from_text("ab")
    tape.move_left()
    assert tape.head == 0
    assert tape.read() == BLANK
    assert tape.to_text() == "_ab"
    assert len(tape) == 3


def test_move_right_from_last_cell_appends_one_blank() -> None:
    tape = Tape.from_text("ab")
    tape.move_right()
    assert tape.read() == "b"
    tape.move_right()
    assert tape.head == 2
    assert tape.read() == BLANK
    assert tape.to_text() == "ab_"


def test_moves_inside_tape_do_not_grow_it() -> None:
    tape = Tape.from_text("abc")
    tape.move_right()
    tape.move_left()
    assert tape.head == 0
    assert tape.to_text() == "abc"


def test_write_only_touches_head_cell() -> None:
    tape = Tape.from_text("000")
    tape.move_right()
    tape.write("1")
    assert tape.to_text() == "010"
    assert str(tape) == "010"


def test_empty_text_is_single_blank_cell() -> None:
    tape = Tape.from_text("")
    assert tape.cells == [BLANK]
    assert tape.head == 0


def test_parse_tape_uses_first_line_and_checks_alphabet() -> None:
    alphabet = parse_alphabet("0 1")
    tape = parse_tape("10_1\nignored\n", alphabet)
    assert tape.cells == ["1", "0", "_", "1"]

    with pytest.raises(UnknownSymbol) as excinfo:
        parse_tape("102", alphabet)
    assert excinfo.value.symbol == "2"
    assert excinfo.value.line == 1


def test_load_tape_empty_file(tmp_path: Path) -> None:
    path = tmp_path / "tape"
    path.write_text("", encoding="utf-8")
    assert load_tape(path, parse_alphabet("0 1")).to_text() == BLANK


def test_text_round_trip_after_growth() -> None:
    tape = Tape.from_text("1")
    tape.move_left()
    tape.write("0")
    tape.move_right()
    tape.move_right()
    text = tape.to_text()
    assert text == "01_"
    assert Tape.from_text(text).cells == tape.cells
