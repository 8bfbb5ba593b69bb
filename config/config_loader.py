import json
import os

DEFAULT_CONFIG_PATH = "config/runtime_config.json"

DEFAULT_CONFIG = {
    "alphabet_path": "files/alphabet",
    "tape_path": "files/tape",
    "program_path": "files/program",
    "trace_path": "files/logs",
    "verbose": False,
    "max_steps": 1_000_000,
    "output_directory": "logs/",
    "log_file_prefix": "turing_"
}

# Expected types for validation
CONFIG_SCHEMA = {
    "alphabet_path": str,
    "tape_path": str,
    "program_path": str,
    "trace_path": str,
    "verbose": bool,
    "max_steps": int,
    "output_directory": str,
    "log_file_prefix": str
}

def validate_config(config):
    for key, expected_type in CONFIG_SCHEMA.items():
        if key not in config:
            raise ValueError(f"Missing required configuration key: {key}")
        # bool is an int subclass; keep the two apart
        value = config[key]
        if not isinstance(value, expected_type) or (expected_type is int and isinstance(value, bool)):
            raise TypeError(f"Config key '{key}' expected {expected_type}, got {type(value)}.")

    if config["max_steps"] < 0:
        raise ValueError("max_steps must be 0 (unbounded) or a positive step count.")

    for key in ("alphabet_path", "tape_path", "program_path", "trace_path"):
        if not config[key]:
            raise ValueError(f"Config key '{key}' must not be empty.")

def load_config(path=DEFAULT_CONFIG_PATH):
    config = DEFAULT_CONFIG.copy()

    # Missing file means defaults only
    if os.path.exists(path):
        with open(path, "r", encoding="utf-8") as f:
            try:
                user_config = json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid JSON in configuration file {path}: {e}") from e
        if not isinstance(user_config, dict):
            raise ValueError(f"Configuration file {path} must hold a JSON object.")
        config.update(user_config)

    validate_config(config)

    os.makedirs(config["output_directory"], exist_ok=True)

    return config

def save_config(config, path=DEFAULT_CONFIG_PATH):
    validate_config(config)
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(config, f, indent=4)
