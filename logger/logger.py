import json
import os
from datetime import datetime, timezone

class JSONLogger:
    def __init__(self, output_directory="logs/", log_file_prefix="turing_"):
        self.output_directory = output_directory
        self.log_file_prefix = log_file_prefix
        os.makedirs(self.output_directory, exist_ok=True)
        self.today = datetime.now(timezone.utc).strftime("%Y-%m-%d")
        self.current_log = self._get_log_filename()

    def _get_log_filename(self):
        filename = f"{self.log_file_prefix}{self.today}.jsonl"  # JSON lines format
        return os.path.join(self.output_directory, filename)

    def _log_to_file(self, filename, entries):
        path = os.path.join(self.output_directory, filename)
        with open(path, "a", encoding="utf-8") as f:
            for entry in entries:
                f.write(json.dumps(entry) + "\n")

    def log(self, entry: dict):
        """Log a single run record to the main run log."""
        with open(self.current_log, "a", encoding="utf-8") as f:
            f.write(json.dumps(entry) + "\n")

    def log_batch(self, entries: list):
        """Log a batch of run records to the main run log."""
        with open(self.current_log, "a", encoding="utf-8") as f:
            for entry in entries:
                f.write(json.dumps(entry) + "\n")

    def log_halting(self, entries: list):
        """Log records of tapes that reached a halt rule."""
        self._log_to_file(f"halting_{self.today}.jsonl", entries)

    def log_failures(self, entries: list):
        """Log records of tapes that got stuck or hit the step limit."""
        self._log_to_file(f"failed_{self.today}.jsonl", entries)


def run_record(paths, status, result=None, error=None):
    """Build the JSON record for one finished (or failed) run."""
    return {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "alphabet_path": str(paths.get("alphabet_path")),
        "tape_path": str(paths.get("tape_path")),
        "program_path": str(paths.get("program_path")),
        "status": status,
        "steps": result.steps if result else None,
        "final_tape": result.tape if result else None,
        "head": result.head if result else None,
        "state": result.state if result else None,
        "error": str(error) if error else None,
    }
