class TuringError(Exception):
    """Base class for every load-time and run-time failure of a machine."""


class IOFailure(TuringError):
    def __init__(self, path, reason):
        self.path = str(path)
        self.reason = str(reason)
        super().__init__(f"Cannot read {self.path}: {self.reason}")


class MalformedAlphabet(TuringError):
    def __init__(self, detail):
        self.detail = detail
        super().__init__(f"Malformed alphabet: {detail}")


class ProgramError(TuringError):
    """An error tied to a 1-based line of a program or tape file."""

    def __init__(self, line, message):
        self.line = line
        super().__init__(f"{message} (line {line})")


class MalformedRule(ProgramError):
    def __init__(self, line, detail):
        self.detail = detail
        super().__init__(line, f"Malformed rule: {detail}")


class InvalidState(ProgramError):
    def __init__(self, line, token):
        self.token = token
        super().__init__(line, f"Invalid state: [{token}]")


class UnknownSymbol(ProgramError):
    def __init__(self, line, symbol):
        self.symbol = symbol
        super().__init__(line, f"Unknown symbol: [{symbol}]")


class InvalidMove(ProgramError):
    def __init__(self, line, token):
        self.token = token
        super().__init__(line, f"Invalid move: [{token}]")


class EmptyProgram(TuringError):
    def __init__(self):
        super().__init__("Empty program: no rules found")


class StuckState(TuringError):
    def __init__(self, state, symbol):
        self.state = state
        self.symbol = symbol
        super().__init__(f"No applicable rule for state {state}, symbol [{symbol}]")


class StepLimitExceeded(TuringError):
    def __init__(self, steps):
        self.steps = steps
        super().__init__(f"Machine did not halt within {steps:,} steps")
