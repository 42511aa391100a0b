import argparse
import logging
from typing import Dict, Any

from sui_dev_tools.cli.adapter_factory import create_tool_registry
from sui_dev_tools.infrastructure.adapters.ui.rich_ui_adapter import RichUIAdapter

logger = logging.getLogger(__name__)


async def handle_validate(args: argparse.Namespace, config: Dict[str, Any], ui: RichUIAdapter) -> int:
    """
    Handles the 'validate' command logic.

    Build errors and failing tests are reported results, not command
    failures; the exit status is non-zero only when the tool call failed.
    """
    registry = create_tool_registry(config)
    response = await registry.invoke("validate_project")
    if not response["success"]:
        ui.log(f"Validation failed: {response['error']}", "error")
        return 1

    payload = response["result"]
    if args.json:
        ui.print_json(payload)
    else:
        ui.validation_report(payload)
    return 0
