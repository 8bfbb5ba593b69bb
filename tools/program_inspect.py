# tools/program_inspect.py

import argparse
import sys

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from simulator.alphabet import load_alphabet
from simulator.errors import TuringError
from simulator.program import load_program

NO_RULE = "-"


def action_text(rule):
    """Compact action notation: <write><move><next_state>, e.g. 1>2."""
    if rule is None:
        return NO_RULE
    return f"{rule.next_symbol}{rule.move.value}{rule.next_state}"


def transition_grid(table):
    """Return (symbols, rows) where each row is [state, action, action, ...]."""
    symbols = table.symbols
    rows = []
    for state in table.states:
        row = [str(state)]
        for symbol in symbols:
            row.append(action_text(table.lookup(state, symbol)))
        rows.append(row)
    return symbols, rows


def print_transition_table(table, console=None):
    """Pretty print the program as a state x symbol grid."""
    console = console or Console()
    symbols, rows = transition_grid(table)

    grid = Table(title=f"Transition Table ({len(table)} rules)", show_header=True, header_style="bold magenta")
    grid.add_column("State", justify="center")
    for symbol in symbols:
        grid.add_column(escape(symbol), justify="center")
    for row in rows:
        grid.add_row(*[escape(cell) for cell in row])
    console.print(grid)

    console.print("\n[bold]Rules[/bold]")
    for line in table.lines():
        console.print(f"  {escape(line)}")


def latex_table(table):
    symbols, rows = transition_grid(table)
    symbols = [s.replace("_", r"\_") for s in symbols]
    rows = [[cell.replace("_", r"\_") for cell in row] for row in rows]
    lines = [r"\begin{array}{c|" + "c" * len(symbols) + "}"]
    lines.append("State/Symbol & " + " & ".join([f"\\text{{{s}}}" for s in symbols]) + r" \\ \hline")
    for row in rows:
        lines.append(" & ".join(row) + r" \\")
    lines.append(r"\end{array}")
    return "\n".join(lines)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Turing Machine Program Inspector")
    parser.add_argument("--alph", required=True, help="Path to alphabet file")
    parser.add_argument("--prog", required=True, help="Path to program file")
    parser.add_argument("--latex", action="store_true", help="Also print the table as a LaTeX array")
    args = parser.parse_args(argv)

    console = Console()
    try:
        alphabet = load_alphabet(args.alph)
        table = load_program(args.prog, alphabet)
    except TuringError as e:
        Console(stderr=True, soft_wrap=True).print(f"[red]Error: {escape(str(e))}[/red]")
        return 1

    print_transition_table(table, console=console)

    if args.latex:
        console.print("\n=== LaTeX Table ===", markup=False)
        print(latex_table(table))
    return 0


if __name__ == "__main__":
    sys.exit(main())
