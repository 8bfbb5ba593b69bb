import enum
from dataclasses import dataclass, field

from simulator.alphabet import read_text
from simulator.errors import (
    EmptyProgram,
    InvalidMove,
    InvalidState,
    MalformedRule,
    UnknownSymbol,
)

COMMENT_MARKER = "#"
SEPARATOR = "->"
FIELD_COUNT = 6
COMPACT_WIDTH = 7


class Move(enum.Enum):
    LEFT = "<"
    RIGHT = ">"
    HALT = "!"


@dataclass(frozen=True)
class Rule:
    next_symbol: str
    next_state: int
    move: Move
    line: int = field(default=0, compare=False)


class TransitionTable:
    """Validated (state, symbol) -> Rule mapping. Read-only once built."""

    def __init__(self, rules):
        if not rules:
            raise EmptyProgram()
        self._rules = dict(rules)

    def lookup(self, state, symbol):
        return self._rules.get((state, symbol))

    @property
    def states(self):
        found = set()
        for (state, _), rule in self._rules.items():
            found.add(state)
            found.add(rule.next_state)
        return sorted(found)

    @property
    def symbols(self):
        found = set()
        for (_, symbol), rule in self._rules.items():
            found.add(symbol)
            found.add(rule.next_symbol)
        return sorted(found)

    def items(self):
        return sorted(self._rules.items(), key=lambda item: item[0])

    def __iter__(self):
        return iter(key for key, _ in self.items())

    def __len__(self):
        return len(self._rules)

    def __contains__(self, key):
        return key in self._rules

    def __getitem__(self, key):
        return self._rules[key]

    def lines(self):
        return [render_rule(state, symbol, rule) for (state, symbol), rule in self.items()]


def render_rule(state, symbol, rule):
    return f"{state}{symbol}{SEPARATOR}{rule.next_state}{rule.next_symbol}{rule.move.value}"


# === Line Grammar ===
def split_fields(line, line_no):
    """Split a rule line into its six fields, spaced or compact."""
    if any(ch.isspace() for ch in line):
        fields = line.split()
        if len(fields) != FIELD_COUNT:
            raise MalformedRule(line_no, f"expected {FIELD_COUNT} fields, got {len(fields)}")
        return fields

    # Compact layout: <state><symbol>-><next_state><next_symbol><move>
    if len(line) != COMPACT_WIDTH:
        raise MalformedRule(line_no, f"expected {COMPACT_WIDTH} characters, got {len(line)}")
    return [line[0], line[1], line[4], line[5], line[2:4], line[6]]


def parse_state(token, line_no):
    if not token.isdecimal() or not token.isascii():
        raise InvalidState(line_no, token)
    return int(token)


def parse_symbol(token, alphabet, line_no):
    if len(token) != 1 or token not in alphabet:
        raise UnknownSymbol(line_no, token)
    return token


def parse_move(token, line_no):
    try:
        return Move(token)
    except ValueError:
        raise InvalidMove(line_no, token) from None


def parse_rule_line(line, alphabet, line_no):
    """Return ((state, symbol), Rule) for a single rule line."""
    current_state, current_symbol, next_state, next_symbol, separator, move = split_fields(line, line_no)
    if separator != SEPARATOR:
        raise MalformedRule(line_no, f"expected separator [{SEPARATOR}], got [{separator}]")

    key = (parse_state(current_state, line_no), parse_symbol(current_symbol, alphabet, line_no))
    rule = Rule(
        next_symbol=parse_symbol(next_symbol, alphabet, line_no),
        next_state=parse_state(next_state, line_no),
        move=parse_move(move, line_no),
        line=line_no,
    )
    return key, rule


def parse_program(text, alphabet):
    rules = {}
    for line_no, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith(COMMENT_MARKER):
            continue
        key, rule = parse_rule_line(line, alphabet, line_no)
        # Last rule wins for a repeated (state, symbol)
        rules[key] = rule
    return TransitionTable(rules)


def load_program(path, alphabet):
    return parse_program(read_text(path), alphabet)
