import argparse
import logging
from typing import Dict, Any

from sui_dev_tools.cli.adapter_factory import create_tool_registry
from sui_dev_tools.infrastructure.adapters.ui.rich_ui_adapter import RichUIAdapter

logger = logging.getLogger(__name__)


async def handle_format(args: argparse.Namespace, config: Dict[str, Any], ui: RichUIAdapter) -> int:
    """Handles the 'format' command logic."""
    registry = create_tool_registry(config)
    response = await registry.invoke("format_project")
    if not response["success"]:
        ui.log(f"Formatting failed: {response['error']}", "error")
        return 1
    ui.log(response["result"], "success")
    return 0
