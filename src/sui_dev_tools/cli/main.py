import asyncio
import logging
from pathlib import Path
from typing import List, Optional

from sui_dev_tools.cli.commands.argument_parser import parse_arguments
from sui_dev_tools.cli.commands.config_loader import ensure_app_directories, load_and_resolve_config
from sui_dev_tools.cli.commands.format_command import handle_format
from sui_dev_tools.cli.commands.info_commands import handle_doctor, handle_tools
from sui_dev_tools.cli.commands.validate_command import handle_validate
from sui_dev_tools.cli.logging_setup import setup_logging
from sui_dev_tools.domain.errors import ConfigurationError
from sui_dev_tools.infrastructure.adapters.ui.rich_ui_adapter import RichUIAdapter

logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_arguments(argv)
    ui = RichUIAdapter()

    try:
        config = load_and_resolve_config(Path.cwd(), args.config)
        if args.project:
            config['project']['root_path'] = str(Path(args.project).expanduser().resolve())
    except ConfigurationError as e:
        ui.log(f"Configuration error: {e}", "error")
        return 2

    ensure_app_directories(config)
    setup_logging(config)

    try:
        if args.command == "format":
            return asyncio.run(handle_format(args, config, ui))
        if args.command == "validate":
            return asyncio.run(handle_validate(args, config, ui))
        if args.command == "tools":
            return handle_tools(args, config, ui)
        if args.command == "doctor":
            return handle_doctor(args, config, ui)
    except ConfigurationError as e:
        ui.log(f"Configuration error: {e}", "error")
        return 2
    except KeyboardInterrupt:
        logger.warning("Interrupted")
        return 130

    logger.error(f"Unknown command: {args.command}")
    return 2
