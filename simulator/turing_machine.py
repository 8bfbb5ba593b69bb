from dataclasses import dataclass

from simulator.errors import StepLimitExceeded, StuckState
from simulator.program import Move, Rule

INITIAL_STATE = 0


@dataclass(frozen=True)
class Snapshot:
    step: int
    state_before: int
    symbol_before: str
    head_before: int
    tape_before: str
    rule: Rule
    head_after: int
    tape_after: str


@dataclass
class RunResult:
    tape: str
    head: int
    state: int
    steps: int
    halted: bool


class TuringMachine:
    def __init__(self, table, tape):
        self.table = table
        self.tape = tape
        self.current_state = INITIAL_STATE
        self.steps = 0
        self.halted = False

    def step(self, sink=None):
        """
        Apply one rule to the tape. Raises StuckState when the table has no rule
        for the current (state, symbol); the machine is left untouched in that case.
        """
        if self.halted:
            return None

        symbol = self.tape.read()
        rule = self.table.lookup(self.current_state, symbol)
        if rule is None:
            raise StuckState(self.current_state, symbol)

        state_before = self.current_state
        head_before = self.tape.head
        tape_before = self.tape.to_text() if sink is not None else None

        self.tape.write(rule.next_symbol)
        self.current_state = rule.next_state

        if rule.move is Move.RIGHT:
            self.tape.move_right()
        elif rule.move is Move.LEFT:
            self.tape.move_left()
        else:
            self.halted = True

        self.steps += 1

        if sink is not None:
            sink(Snapshot(
                step=self.steps,
                state_before=state_before,
                symbol_before=symbol,
                head_before=head_before,
                tape_before=tape_before,
                rule=rule,
                head_after=self.tape.head,
                tape_after=self.tape.to_text(),
            ))
        return rule

    def run(self, sink=None, max_steps=None):
        while not self.halted:
            if max_steps is not None and self.steps >= max_steps:
                raise StepLimitExceeded(self.steps)
            self.step(sink)
        return self.result()

    def result(self):
        return RunResult(
            tape=self.tape.to_text(),
            head=self.tape.head,
            state=self.current_state,
            steps=self.steps,
            halted=self.halted,
        )
