"""Console entry point for modelhub."""

import sys
from typing import List, Optional

from .cli import parse_arguments
from .commands import CommandContext, complete_models_command, models_command
from .settings import SettingsStore
from .utils import setup_logger


def main(argv: Optional[List[str]] = None) -> int:
    """Run one ``models`` command and print its message.

    Returns:
        Process exit code: 0 on success, 1 when the command reported an error.
    """
    args = parse_arguments(argv)
    logger = setup_logger("modelhub", verbose=args.verbose)

    settings = SettingsStore(
        user_dir=args.user_dir,
        workspace_dir=args.workspace_dir,
        logger=logger,
    )
    context = CommandContext(settings=settings, logger=logger)
    raw = " ".join(args.command)

    if args.complete:
        for candidate in complete_models_command(context, raw):
            print(candidate)
        return 0

    result = models_command(context, raw)
    stream = sys.stderr if result.is_error else sys.stdout
    print(result.content, file=stream)
    return 1 if result.is_error else 0


if __name__ == "__main__":
    sys.exit(main())
