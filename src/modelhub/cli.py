"""Command line interface for modelhub."""

import argparse
from pathlib import Path
from typing import List, Optional


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        argv: Argument list (defaults to sys.argv[1:]).

    Returns:
        The parsed argparse Namespace.
    """
    parser = argparse.ArgumentParser(
        prog="modelhub",
        description="modelhub: Manage AI models and providers.",
        epilog=(
            "Commands:\n"
            "  list | ls                      List providers and models\n"
            "  set <provider> [<model>]       Switch the current model\n"
            "  key <provider> <api-key...>    Store a provider API key\n"
            "  url <provider> <base-url>      Override a provider endpoint\n"
            "  current                        Show the current model"
        ),
        formatter_class=argparse.RawTextHelpFormatter
    )

    parser.add_argument("command", nargs=argparse.REMAINDER, help="Subcommand and its arguments")

    store_group = parser.add_argument_group("Settings Options")
    store_group.add_argument(
        "--user-dir", type=Path, help="User settings directory (default: $MODELHUB_HOME or ~/.modelhub)"
    )
    store_group.add_argument(
        "--workspace-dir", type=Path, help="Workspace directory (default: current directory)"
    )

    meta_group = parser.add_argument_group("Meta Options")
    meta_group.add_argument(
        "--complete", action="store_true", help="Print completions for the given partial command"
    )
    meta_group.add_argument("-v", "--verbose", action="store_true", help="Show detailed logs")

    return parser.parse_args(argv)
