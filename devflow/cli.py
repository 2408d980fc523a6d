"""
DevFlow command line entry point.

Usage:
    devflow              Launch the interactive dashboard

Environment:
    DEVFLOW_SEARCH_PATHS  Search roots, separated by the OS path separator
    DEVFLOW_MAX_DEPTH     Directory levels to walk below each root (default 3)
    DEVFLOW_LOG_LEVEL     Log level name (default WARNING)
    DEVFLOW_LOG_FILE      Also write log records to this file
"""

import argparse
import sys

from devflow.config import AppConfig, ConfigError
from devflow.log_config import setup_logging


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="devflow",
        description="DevFlow - browse local development projects",
        epilog="Environment:" + __doc__.split("Environment:", 1)[1],
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.parse_args(argv)

    try:
        config = AppConfig.from_env()
    except ConfigError as e:
        print(f"devflow: {e}", file=sys.stderr)
        return 2

    setup_logging(config.log_level, config.log_file)

    from devflow.app import run

    run(config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
