from simulator.alphabet import BLANK, read_text
from simulator.errors import UnknownSymbol


class Tape:
    """Cell list plus head index. Grows by one blank cell whenever the head steps off an end."""

    def __init__(self, cells=None, head=0):
        self.cells = list(cells) if cells else [BLANK]
        if not 0 <= head < len(self.cells):
            raise IndexError(f"Head {head} outside tape of length {len(self.cells)}")
        self.head = head

    @classmethod
    def from_text(cls, text):
        return cls(list(text))

    def read(self):
        return self.cells[self.head]

    def write(self, symbol):
        self.cells[self.head] = symbol

    def move_right(self):
        self.head += 1
        if self.head == len(self.cells):
            self.cells.append(BLANK)

    def move_left(self):
        self.head -= 1
        if self.head == -1:
            self.cells.insert(0, BLANK)
            self.head = 0

    def to_text(self):
        return "".join(self.cells)

    def __len__(self):
        return len(self.cells)

    def __str__(self):
        return self.to_text()

    def __repr__(self):
        return f"Tape({self.to_text()!r}, head={self.head})"


def parse_tape(text, alphabet):
    lines = text.splitlines()
    first = lines[0] if lines else ""
    for symbol in first:
        if symbol not in alphabet:
            raise UnknownSymbol(1, symbol)
    return Tape.from_text(first)


def load_tape(path, alphabet):
    return parse_tape(read_text(path), alphabet)
