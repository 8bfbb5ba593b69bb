# app.py

import argparse
import sys

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt, IntPrompt, Confirm

from config.config_loader import DEFAULT_CONFIG_PATH, load_config, save_config
from logger.logger import JSONLogger, run_record
from logger.trace_recorder import TraceRecorder
from simulator.alphabet import load_alphabet
from simulator.errors import StepLimitExceeded, StuckState, TuringError
from simulator.program import load_program
from simulator.tape import load_tape
from simulator.turing_machine import TuringMachine
from tools.program_inspect import print_transition_table

console = Console()
err_console = Console(stderr=True, soft_wrap=True)

EXIT_OK = 0
EXIT_INPUT_ERROR = 1
EXIT_STUCK = 2
EXIT_STEP_LIMIT = 3

# === Core Run ===
def load_machine(alphabet_path, tape_path, program_path):
    """Load and validate the three input artifacts. Raises TuringError on any defect."""
    alphabet = load_alphabet(alphabet_path)
    tape = load_tape(tape_path, alphabet)
    table = load_program(program_path, alphabet)
    return alphabet, tape, table

def run_machine(config):
    """Run one machine described by config. Returns (exit_code, RunResult or None)."""
    paths = {key: config[key] for key in ("alphabet_path", "tape_path", "program_path")}
    json_logger = JSONLogger(config["output_directory"], config["log_file_prefix"])
    max_steps = config["max_steps"] or None

    try:
        alphabet, tape, table = load_machine(**paths)
    except TuringError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        json_logger.log(run_record(paths, "error", error=e))
        return EXIT_INPUT_ERROR, None

    machine = TuringMachine(table, tape)
    try:
        if config["verbose"]:
            with TraceRecorder(config["trace_path"]) as recorder:
                recorder.write_header(alphabet, tape, table)
                result = machine.run(sink=recorder, max_steps=max_steps)
        else:
            result = machine.run(max_steps=max_steps)
    except StuckState as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        json_logger.log(run_record(paths, "stuck", machine.result(), e))
        return EXIT_STUCK, None
    except StepLimitExceeded as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        json_logger.log(run_record(paths, "step_limit", machine.result(), e))
        return EXIT_STEP_LIMIT, None
    except OSError as e:
        err_console.print(f"[red]Error: cannot write trace {escape(config['trace_path'])}: {escape(str(e))}[/red]")
        json_logger.log(run_record(paths, "error", machine.result(), e))
        return EXIT_INPUT_ERROR, None

    json_logger.log(run_record(paths, "halted", result))
    return EXIT_OK, result

# === Interactive Mode ===
def show_main_menu():
    console.print("\n[bold cyan]Turing Machine Simulator[/bold cyan]")
    console.print("[1] Run Machine")
    console.print("[2] Inspect Program")
    console.print("[3] Edit Config")
    console.print("[4] Exit")

def handle_run(config):
    console.print("\n[bold]Run Machine[/bold]")
    code, result = run_machine(config)
    if code == EXIT_OK:
        console.print(f"[green]Halted after {result.steps:,} steps in state {result.state}.[/green]")
        console.print(escape(result.tape))
        console.print(" " * result.head + "^")
        if config["verbose"]:
            console.print(f"[cyan]Trace written to {escape(config['trace_path'])}[/cyan]")

def handle_inspect(config):
    console.print("\n[bold]Inspect Program[/bold]")
    try:
        alphabet = load_alphabet(config["alphabet_path"])
        table = load_program(config["program_path"], alphabet)
    except TuringError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        return
    print_transition_table(table, console=console)

def handle_edit_config(config, config_path):
    console.print("\n[bold]Edit Configuration[/bold]")

    alphabet_path = Prompt.ask("Alphabet file", default=config["alphabet_path"])
    tape_path = Prompt.ask("Tape file", default=config["tape_path"])
    program_path = Prompt.ask("Program file", default=config["program_path"])
    trace_path = Prompt.ask("Trace file", default=config["trace_path"])
    verbose = Confirm.ask("Write trace?", default=config["verbose"])
    max_steps = IntPrompt.ask("Max Steps (0 = unbounded)", default=config["max_steps"])

    config.update({
        "alphabet_path": alphabet_path,
        "tape_path": tape_path,
        "program_path": program_path,
        "trace_path": trace_path,
        "verbose": verbose,
        "max_steps": max_steps
    })

    try:
        save_config(config, config_path)
    except (TypeError, ValueError) as e:
        console.print(f"[red]Configuration not saved: {escape(str(e))}[/red]")
        return
    console.print("[green]Configuration updated successfully.[/green]")

def interactive_main(config, config_path):
    while True:
        show_main_menu()
        choice = Prompt.ask("\nChoose an option", choices=["1", "2", "3", "4"], default="4")

        if choice == "1":
            handle_run(config)
        elif choice == "2":
            handle_inspect(config)
        elif choice == "3":
            handle_edit_config(config, config_path)
            config = load_config(config_path)
        elif choice == "4":
            console.print("[bold green]Goodbye![/bold green]")
            break

# === CLI Mode ===
def build_parser():
    parser = argparse.ArgumentParser(description="Deterministic single-tape Turing machine simulator")
    parser.add_argument("--alph", help="Path to alphabet file")
    parser.add_argument("--tape", help="Path to tape file")
    parser.add_argument("--prog", help="Path to program file")
    parser.add_argument("--logs", help="Trace will be saved to the specified file")
    parser.add_argument("-v", "--verbose", action="store_true", default=None, help="Write a step-by-step trace")
    parser.add_argument("--max-steps", type=int, help="Step limit before giving up (0 = unbounded)")
    parser.add_argument("--config", default=DEFAULT_CONFIG_PATH, help="Runtime configuration file")
    parser.add_argument("--interactive", action="store_true", help="Start the interactive menu")
    return parser

def apply_overrides(config, args):
    overrides = {
        "alphabet_path": args.alph,
        "tape_path": args.tape,
        "program_path": args.prog,
        "trace_path": args.logs,
        "verbose": args.verbose,
        "max_steps": args.max_steps,
    }
    config.update({key: value for key, value in overrides.items() if value is not None})
    return config

def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        config = apply_overrides(load_config(args.config), args)
        if config["max_steps"] < 0:
            raise ValueError("--max-steps must not be negative.")
    except (TypeError, ValueError, OSError) as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        return EXIT_INPUT_ERROR

    for key in ("alphabet_path", "tape_path", "program_path"):
        if not config[key]:
            err_console.print(f"[red]Error: incorrect {key.split('_')[0]} file path: {escape(repr(config[key]))}[/red]")
            return EXIT_INPUT_ERROR

    if args.interactive:
        interactive_main(config, args.config)
        return EXIT_OK

    code, result = run_machine(config)
    if code == EXIT_OK:
        print(result.tape)
    return code

if __name__ == "__main__":
    sys.exit(main())
