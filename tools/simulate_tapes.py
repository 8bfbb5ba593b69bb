# tools/simulate_tapes.py

import argparse
import json
import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, BarColumn, TextColumn, TimeElapsedColumn

from logger.logger import JSONLogger
from simulator.alphabet import load_alphabet, read_text
from simulator.errors import StepLimitExceeded, StuckState, TuringError
from simulator.program import load_program
from simulator.tape import parse_tape
from simulator.turing_machine import TuringMachine

console = Console()

# === Utility Loaders ===
def load_tape_pool(tapes_file):
    """One tape per line; returns [(line_no, text)]. Blank lines are real (single blank cell) tapes."""
    return list(enumerate(read_text(tapes_file).splitlines(), start=1))

def load_checkpoint(checkpoint_path):
    if checkpoint_path.exists():
        with open(checkpoint_path, "r", encoding="utf-8") as f:
            checkpoint = json.load(f)
        return checkpoint.get("completed", [])
    return []

def save_checkpoint(completed, checkpoint_path):
    with open(checkpoint_path, "w", encoding="utf-8") as f:
        json.dump({"completed": completed}, f, indent=4)

# === Single Tape ===
def simulate_tape(table, alphabet, text, max_steps=None):
    """Run one tape to completion. Returns a JSON-ready result entry."""
    entry = {"input": text, "status": None, "steps": None, "final_tape": None, "head": None, "error": None}
    try:
        machine = TuringMachine(table, parse_tape(text, alphabet))
    except TuringError as e:
        entry.update(status="error", error=str(e))
        return entry

    try:
        result = machine.run(max_steps=max_steps)
        entry["status"] = "halted"
    except StuckState as e:
        result = machine.result()
        entry.update(status="stuck", error=str(e))
    except StepLimitExceeded as e:
        result = machine.result()
        entry.update(status="step_limit", error=str(e))

    entry.update(steps=result.steps, final_tape=result.tape, head=result.head)
    return entry

# === Main Simulation Runner ===
def simulate_tapes(alphabet_path, program_path, tapes_file, output_name, batch_size=256, max_steps=1000000,
                   results_root="results", json_logger=None):
    alphabet = load_alphabet(alphabet_path)
    table = load_program(program_path, alphabet)

    pool_name = Path(tapes_file).stem
    results_folder = Path(results_root) / pool_name
    results_folder.mkdir(parents=True, exist_ok=True)
    results_file = results_folder / f"{output_name}.jsonl"
    checkpoint_file = results_folder / f"{output_name}_checkpoint.json"

    all_tapes = load_tape_pool(tapes_file)
    completed = load_checkpoint(checkpoint_file)

    pending_tapes = [(line_no, text) for line_no, text in all_tapes if line_no not in completed]
    console.print(f"Loaded {len(all_tapes):,} tapes. {len(pending_tapes):,} pending.")

    with open(results_file, "a", encoding="utf-8") as results_fh:
        for batch_start in range(0, len(pending_tapes), batch_size):
            batch = pending_tapes[batch_start:batch_start + batch_size]

            with Progress(
                    SpinnerColumn(),
                    BarColumn(),
                    "[progress.percentage]{task.percentage:>3.0f}%",
                    TextColumn("{task.completed}/{task.total} Tapes"),
                    TimeElapsedColumn(),
                    console=console
            ) as progress:

                task = progress.add_task("[cyan]Simulating...", total=len(batch))

                batch_results = []

                for line_no, text in batch:
                    entry = simulate_tape(table, alphabet, text, max_steps=max_steps or None)
                    entry["line"] = line_no
                    batch_results.append(entry)
                    completed.append(line_no)
                    progress.update(task, advance=1)

            # === BULK WRITE once per batch ===
            for entry in batch_results:
                results_fh.write(json.dumps(entry) + "\n")
            results_fh.flush()

            if json_logger is not None:
                json_logger.log_halting([e for e in batch_results if e["status"] == "halted"])
                json_logger.log_failures([e for e in batch_results if e["status"] != "halted"])

            save_checkpoint(completed, checkpoint_file)
            console.print(f"Batch {batch_start // batch_size + 1} completed. Checkpoint saved.")

    console.print(f"[green]All tapes simulated. Results saved to {escape(str(results_file))}.[/green]")
    return results_file


# === CLI ===
def main(argv=None):
    parser = argparse.ArgumentParser(description="Run every tape in a file against one program, with checkpointing.")
    parser.add_argument("--alph", required=True, help="Path to alphabet file")
    parser.add_argument("--prog", required=True, help="Path to program file")
    parser.add_argument("--tapes", required=True, help="Path to tape pool file (one tape per line)")
    parser.add_argument("--output", default="results", help="Output result file name (default: results)")
    parser.add_argument("--batch_size", type=int, default=256, help="Batch size per save/checkpoint")
    parser.add_argument("--max_steps", type=int, default=1000000, help="Maximum steps per tape (0 = unbounded)")
    parser.add_argument("--results_root", default="results", help="Folder holding per-pool result folders")
    parser.add_argument("--log_dir", help="Also log halting/failed tapes as JSON lines to this folder")
    args = parser.parse_args(argv)

    if args.batch_size < 1 or args.max_steps < 0:
        parser.error("batch_size must be positive and max_steps must not be negative")

    json_logger = JSONLogger(args.log_dir) if args.log_dir else None
    try:
        simulate_tapes(
            args.alph,
            args.prog,
            args.tapes,
            args.output,
            batch_size=args.batch_size,
            max_steps=args.max_steps,
            results_root=args.results_root,
            json_logger=json_logger
        )
    except TuringError as e:
        Console(stderr=True, soft_wrap=True).print(f"[red]Error: {escape(str(e))}[/red]")
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
