"""CLI entry point for relayrank.

Reads relay records from standard input, one JSON object per line, and
prints the ranked shortlist to standard output. Logs go to standard error.

Examples:
    ```bash
    relayrank < relays.jsonl
    python -m relayrank --config ranking.yaml --log-level INFO < relays.jsonl
    ```
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import TextIO

from relayrank.core.exceptions import RelayRankError
from relayrank.core.logger import Logger, StructuredFormatter
from relayrank.ranking import RankingConfig, format_result, rank_lines


logger = Logger("cli")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="relayrank",
        description="Rank Nostr relays read from stdin by reliability and freshness",
    )

    parser.add_argument(
        "--config",
        type=Path,
        help="Ranking config path (default: built-in settings)",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Log level (default: WARNING)",
    )

    return parser.parse_args(argv)


def setup_logging(level: str) -> None:
    """Install a ``StructuredFormatter`` handler on the root logger (stderr)."""
    handler = logging.StreamHandler()
    handler.setFormatter(StructuredFormatter())
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level))


def run(config: RankingConfig, stdin: TextIO, stdout: TextIO) -> int:
    """Rank the records on ``stdin`` and write the shortlist to ``stdout``.

    Nothing is written to ``stdout`` unless the whole input ranks cleanly.

    Returns:
        Exit code: 0 for success, 1 for failure.
    """
    try:
        ranked = rank_lines(stdin, config=config)
    except RelayRankError as e:
        logger.error("ranking_failed", error=str(e))
        return 1

    for scored in ranked:
        stdout.write(format_result(scored) + "\n")
    stdout.flush()
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point: parse args, load config, and run the pipeline."""
    args = parse_args(argv)
    setup_logging(args.log_level)

    try:
        if args.config is not None:
            config = RankingConfig.from_yaml(args.config)
            logger.info("config_loaded", path=str(args.config))
        else:
            config = RankingConfig()
        return run(config, sys.stdin, sys.stdout)
    except RelayRankError as e:
        logger.error("config_invalid", error=str(e))
        return 1
    except KeyboardInterrupt:
        logger.info("interrupted")
        return 130


def cli() -> None:
    """Synchronous entry point for console_scripts."""
    sys.exit(main())


if __name__ == "__main__":
    cli()
