#!/usr/bin/env python3
"""
Verification script to check if the Sui project tools are properly set up.
This script checks:
1. Python version
2. Required dependencies
3. Configuration file
4. Toolchain executables (sui, formatter)
"""

import os
import shutil
import sys
import importlib
import yaml
from pathlib import Path

# Define colors for terminal output
GREEN = "\033[92m"
YELLOW = "\033[93m"
RED = "\033[91m"
RESET = "\033[0m"
BOLD = "\033[1m"


def print_status(message, status, details=None):
    """Print a status message with color coding."""
    status_color = {
        "OK": GREEN,
        "WARNING": YELLOW,
        "ERROR": RED
    }.get(status, RESET)

    print(f"{message:<50} [{status_color}{status}{RESET}]")
    if details:
        print(f"  {details}")


def check_python_version():
    """Check if Python version is 3.10 or higher."""
    version = sys.version_info
    found = f"Found Python {version.major}.{version.minor}.{version.micro}"
    if version < (3, 10):
        print_status("Python version (3.10+ required)", "ERROR", found)
        return False
    print_status("Python version (3.10+ required)", "OK", found)
    return True


def check_dependencies():
    """Check if required dependencies are installed."""
    required_packages = ["yaml", "rich", "colorama", "google.adk"]

    all_ok = True
    for package in required_packages:
        try:
            importlib.import_module(package)
            print_status(f"Required package: {package}", "OK")
        except ImportError:
            print_status(f"Required package: {package}", "ERROR", "Not installed")
            all_ok = False

    return all_ok


def load_config():
    project_root = Path(__file__).parent.parent
    config_path = project_root / "config" / "application.yml"

    if not config_path.exists():
        print_status("Configuration file", "WARNING", f"Not found at {config_path}, defaults apply")
        return {}

    try:
        with open(config_path, 'r') as f:
            config = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        print_status("Configuration file", "ERROR", f"Invalid YAML: {e}")
        return None

    print_status("Configuration file", "OK")
    return config


def check_project_folder(config):
    """Check that the Move project folder exists and looks like a Move package."""
    folder = os.environ.get("PROJECT_FOLDER") or config.get("project", {}).get("root_path", ".")
    path = Path(folder).expanduser()
    if not path.is_dir():
        print_status("Project folder", "ERROR", f"Path does not exist: {path}")
        return False
    if not (path / "Move.toml").exists():
        print_status("Project folder", "WARNING", f"No Move.toml in {path}")
        return False
    print_status("Project folder", "OK", str(path.resolve()))
    return True


def check_executables(config):
    """Check that the Sui CLI and the formatter are on PATH."""
    sui = os.environ.get("SUI_CMD") or config.get("toolchain", {}).get("sui_command", "sui")
    formatter = os.environ.get("MOVEFMT_CMD") or config.get("formatter", {}).get("command", "movefmt")
    formatter_parts = formatter.split()

    all_ok = True
    for label, executable in (("Sui CLI", sui), ("Formatter", formatter_parts[0] if formatter_parts else "")):
        resolved = shutil.which(executable) if executable else None
        if resolved:
            print_status(f"{label}: {executable}", "OK", resolved)
        else:
            print_status(f"{label}: {executable or '<empty>'}", "ERROR", "Not found in PATH")
            all_ok = False
    return all_ok


def main():
    print(f"{BOLD}Checking Sui project tools setup{RESET}\n")
    results = [check_python_version(), check_dependencies()]

    config = load_config()
    if config is None:
        results.append(False)
    else:
        results.append(check_project_folder(config))
        results.append(check_executables(config))

    print()
    if all(results):
        print(f"{GREEN}{BOLD}All checks passed.{RESET}")
        return 0
    print(f"{YELLOW}{BOLD}Some checks failed. See details above.{RESET}")
    return 1


if __name__ == "__main__":
    sys.exit(main())
