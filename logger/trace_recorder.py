from datetime import datetime

from simulator.program import render_rule

RULE = "----------"


def caret_line(head):
    return " " * head + "^"


def render_header(alphabet, tape, table, when=None):
    when = when or datetime.now().astimezone()
    lines = [
        RULE,
        RULE,
        "",
        f"Date: {when}",
        f"Alphabet: {alphabet}",
        f"Tape: {tape}",
        "Program:",
    ]
    lines.extend(f"\t{line}" for line in table.lines())
    lines.extend(["", RULE, RULE, ""])
    return "\n".join(lines)


def render_snapshot(snapshot):
    transition = render_rule(snapshot.state_before, snapshot.symbol_before, snapshot.rule)
    return "\n".join([
        snapshot.tape_before,
        caret_line(snapshot.head_before),
        transition,
        snapshot.tape_after,
        caret_line(snapshot.head_after),
        "",
    ]) + "\n"


class TraceRecorder:
    """
    Step sink writing a human-readable trace file. The file is truncated on open
    and closed on every exit path when used as a context manager.
    """

    def __init__(self, path):
        self.path = path
        self.fh = None
        self.records = 0

    def __enter__(self):
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    def open(self):
        self.fh = open(self.path, "w", encoding="utf-8")

    def close(self):
        if self.fh is not None:
            self.fh.close()
            self.fh = None

    def write_header(self, alphabet, tape, table):
        self.fh.write(render_header(alphabet, tape, table) + "\n")

    def record(self, snapshot):
        self.fh.write(render_snapshot(snapshot))
        self.records += 1

    __call__ = record
