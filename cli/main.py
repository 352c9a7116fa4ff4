"""Scribe CLI entry point."""

import os
import sys
from pathlib import Path
from typing import List, Optional

from common.logging_config import setup_logging
from cli.commands import set_config_path
from cli.repl import repl_loop

USAGE = "usage: scribe [--debug] [--config PATH]"


def parse_args(argv: List[str]) -> dict:
    """
    Read the entry-point flags.

    Raises:
        SystemExit: On an unknown flag or a --config without a path
    """
    options = {'debug': False, 'config_path': None}
    remaining = list(argv)
    while remaining:
        arg = remaining.pop(0)
        if arg == '--debug':
            options['debug'] = True
        elif arg == '--config':
            if not remaining:
                raise SystemExit(f"--config requires a path\n{USAGE}")
            options['config_path'] = Path(remaining.pop(0)).expanduser()
        else:
            raise SystemExit(f"Unknown argument: {arg}\n{USAGE}")
    return options


def main(argv: Optional[List[str]] = None) -> None:
    options = parse_args(sys.argv[1:] if argv is None else argv)

    log_level = 'DEBUG' if options['debug'] else os.getenv('LOG_LEVEL', 'WARNING')
    logger = setup_logging('cli', log_level=log_level)

    if options['config_path'] is not None:
        set_config_path(options['config_path'])
        logger.info(f"Using config file {options['config_path']}")

    try:
        repl_loop()
    except Exception as e:
        logger.error(f"CLI error: {e}", exc_info=True)
        raise


if __name__ == "__main__":
    main()
