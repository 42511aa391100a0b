import logging
import sys
from typing import Dict, Any

import colorama
from rich.console import Console

from sui_dev_tools.infrastructure.adapters.ui.rich_ui_adapter import RichLoggingHandler

_LEVEL_COLORS = {
    logging.CRITICAL: colorama.Fore.RED + colorama.Style.BRIGHT,
    logging.ERROR: colorama.Fore.RED,
    logging.WARNING: colorama.Fore.YELLOW,
    logging.INFO: colorama.Fore.CYAN,
}


class ColoredFormatter(logging.Formatter):
    """Plain formatter with the level name coloured by colorama."""

    def format(self, record: logging.LogRecord) -> str:
        color = next((c for level, c in sorted(_LEVEL_COLORS.items(), reverse=True) if record.levelno >= level), "")
        original_levelname = record.levelname
        if color:
            record.levelname = f"{color}{record.levelname}{colorama.Style.RESET_ALL}"
        try:
            return super().format(record)
        finally:
            record.levelname = original_levelname


def setup_logging(config: Dict[str, Any]):
    """Configures logging based on the application configuration."""
    log_config = config.get('logging', {})
    level_name = str(log_config.get('level', 'DEBUG')).upper()
    level = getattr(logging, level_name, logging.DEBUG)
    log_format = log_config.get('format', '%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    log_file = log_config.get('log_file')  # Path is already resolved

    ui_config = config.get('ui', {})
    enhanced_logging = ui_config.get('enhanced_logging', True)

    if enhanced_logging:
        # Logs go to stderr so stdout stays clean for command output
        console = Console(stderr=True)
        console_handler = RichLoggingHandler(
            console=console,
            show_time=True,
            show_level=True,
            show_path=False,
            markup=False  # Compiler output contains square brackets
        )
        console_handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        colorama.just_fix_windows_console()
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(ColoredFormatter(log_format))

    handlers = [console_handler]
    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setFormatter(logging.Formatter(log_format))
            handlers.append(file_handler)
        except OSError as e:
            print(f"Warning: Could not configure file logging to {log_file}: {e}", file=sys.stderr)

    # Use force=True to allow reconfiguration if called multiple times (e.g., in tests)
    logging.basicConfig(level=level, handlers=handlers, force=True)

    # Suppress verbose logs from dependencies
    dependencies_to_silence = {
        "google_adk": logging.WARNING,
        "google.adk": logging.WARNING,
        "google.genai": logging.WARNING,
        "httpx": logging.WARNING,
        "asyncio": logging.WARNING,
    }
    for name, lvl in dependencies_to_silence.items():
        logging.getLogger(name).setLevel(lvl)

    logging.info(f"Logging configured. Level: {level_name}, File: {log_file or 'None'}")
