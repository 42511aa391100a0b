import argparse
from typing import Dict, Any

from sui_dev_tools.cli.adapter_factory import (
    create_build_system,
    create_formatter,
    create_process_runner,
    create_tool_registry,
)
from sui_dev_tools.infrastructure.adapters.ui.rich_ui_adapter import RichUIAdapter


def handle_tools(args: argparse.Namespace, config: Dict[str, Any], ui: RichUIAdapter) -> int:
    """Lists the registered tools."""
    registry = create_tool_registry(config)
    ui.panel(registry.instructions, "Sui project tools", border_style="cyan")
    for tool in registry.describe():
        ui.log(f"{tool['name']}: {tool['description']}")
    return 0


def handle_doctor(args: argparse.Namespace, config: Dict[str, Any], ui: RichUIAdapter) -> int:
    """Checks that the toolchain executables are installed."""
    process_runner = create_process_runner()
    build_ok, build_message = create_build_system(config, process_runner).verify_environment()
    fmt_ok, fmt_message = create_formatter(config, process_runner).verify_environment()
    ui.status_table([
        ("Sui toolchain", build_ok, build_message),
        ("Formatter", fmt_ok, fmt_message),
    ])
    return 0 if build_ok and fmt_ok else 1
