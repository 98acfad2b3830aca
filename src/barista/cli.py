"""Command line interface for trying out Barista query understanding.

Classifies one query given as arguments, or reads one query per line from
stdin as a single conversation so follow-ups ("more", "that") resolve.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Iterable, Sequence
from typing import TextIO

from barista.assistant import BaristaAssistant
from barista.config import Config
from barista.nlu import classify_search

logger = logging.getLogger(__name__)
LOGGER_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _classify_line(
    assistant: BaristaAssistant,
    query: str,
    search: bool,
    config: Config,
) -> dict:
    if search:
        return classify_search(query, max_length=config.max_query_length).to_dict()
    return assistant.handle(query).to_dict()


def run(
    queries: Iterable[str],
    config: Config,
    search: bool = False,
    out: TextIO | None = None,
) -> int:
    """Classify queries and write one JSON object per query.

    Args:
        queries: Queries to classify, in conversation order.
        config: Assistant configuration.
        search: Use the search taxonomy instead of the chat assistant.
        out: Stream receiving the JSON lines; defaults to stdout.

    Returns:
        Number of queries classified.
    """
    out = out or sys.stdout
    assistant = BaristaAssistant(config)
    count = 0
    for query in queries:
        if not query.strip():
            continue
        result = _classify_line(assistant, query.strip(), search, config)
        out.write(json.dumps(result, ensure_ascii=False) + "\n")
        count += 1
    logger.debug(f"Classified {count} queries")
    return count


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Classify portal queries into Barista intents",
    )
    parser.add_argument(
        "query",
        nargs="*",
        help="Query to classify; reads one query per line from stdin when omitted",
    )
    parser.add_argument(
        "--search",
        action="store_true",
        help="Classify with the inline search taxonomy",
    )
    parser.add_argument(
        "--env-file",
        default=None,
        help="Path to a .env file with BARISTA_* settings",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    args = parser.parse_args(argv)

    try:
        config = Config.from_env(args.env_file)
    except ValueError as e:
        logging.basicConfig(format=LOGGER_FORMAT)
        logging.error(f"Configuration error: {e}")
        sys.exit(2)

    # Configure logging with the config-specified level
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else getattr(logging, config.log_level),
        format=LOGGER_FORMAT,
    )

    queries = [" ".join(args.query)] if args.query else sys.stdin
    try:
        run(queries, config, search=args.search)
    except KeyboardInterrupt:
        logging.info("Interrupted by user")
