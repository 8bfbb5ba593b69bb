from simulator.errors import IOFailure, MalformedAlphabet

BLANK = "_"


class AlphabetSet:
    """Declared tape symbols. The blank is always a member, declared or not."""

    def __init__(self, symbols):
        self._symbols = frozenset(symbols)

    @property
    def symbols(self):
        return sorted(self._symbols)

    def __contains__(self, symbol):
        return symbol == BLANK or symbol in self._symbols

    def __len__(self):
        return len(self._symbols)

    def __iter__(self):
        return iter(self.symbols)

    def __eq__(self, other):
        return isinstance(other, AlphabetSet) and self._symbols == other._symbols

    def __hash__(self):
        return hash(self._symbols)

    def __repr__(self):
        return f"AlphabetSet({self.symbols!r})"

    def __str__(self):
        return " ".join(self.symbols)


def parse_alphabet(text):
    declaration = next((line for line in text.splitlines() if line.strip()), None)
    if declaration is None:
        raise MalformedAlphabet("empty alphabet")

    tokens = declaration.split()
    for token in tokens:
        if len(token) != 1:
            raise MalformedAlphabet(f"symbol [{token}] is not a single character")
    return AlphabetSet(tokens)


def read_text(path):
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise IOFailure(path, e) from e


def load_alphabet(path):
    return parse_alphabet(read_text(path))
