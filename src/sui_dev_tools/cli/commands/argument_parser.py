import argparse
from typing import List, Optional


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Configures and parses command line arguments for the application.

    Returns:
        argparse.Namespace: An object containing the parsed arguments.
    """
    parser = argparse.ArgumentParser(
        prog="sui-dev-tools",
        description="Format, build and test a Sui Move project",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument(
        "--config",
        default="config/application.yml",
        help="Path to the YAML configuration file, relative to the working directory."
    )
    parser.add_argument(
        "--project",
        help="Move project folder. Overrides project.root_path and $PROJECT_FOLDER."
    )
    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        help="Available commands"
    )

    subparsers.add_parser(
        "format",
        help="Run the formatter over the project's sources and tests.",
    )

    parser_validate = subparsers.add_parser(
        "validate",
        help="Build the project and run its tests.",
        description="Builds the project and, when the build has no errors, runs the tests. "
                    "Reports compiler warnings and errors and the test verdict."
    )
    parser_validate.add_argument(
        "--json",
        action="store_true",
        help="Print the raw result payload as JSON."
    )

    subparsers.add_parser(
        "tools",
        help="List the tools the service exposes.",
    )

    subparsers.add_parser(
        "doctor",
        help="Check that the toolchain and formatter executables can be found.",
    )

    return parser.parse_args(argv)
