"""Display live or previous NHL match results on the command line.

The output mimics page 235 of the Finnish YLE Teksti-TV, which has shown NHL
results for decades. Scores come from https://github.com/peruukki/nhl-score-api.

Players listed one last name per line in ``$HOME/.235.config`` can be
highlighted in the goal list (``--highlight``) and summarised per game
(``--stats``).

Usage
-----
nhl235 [--nocolors] [--highlight] [--stats]
"""
from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Any, Callable, List, Optional, Sequence, TextIO

from . import __version__
from .client import DECODE, ERROR_MESSAGES, FetchError, fetch_scores
from .config import LOG_LEVEL_ENV, read_highlights
from .feed import FeedError, parse_feed
from .render import RenderOptions, print_games
from .transform import transform_games

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nhl235",
        description="Display live or previous NHL match results on command line",
        epilog="Homepage: https://hamatti.github.io/nhl-235/",
    )
    parser.add_argument("--version", action="store_true", help="Current version")
    parser.add_argument("--nocolors", action="store_true", help="Disable terminal colors")
    parser.add_argument(
        "--highlight",
        action="store_true",
        help=(
            "Highlight players based on $HOME/.235.config file. "
            "If --nocolors is enabled, does nothing"
        ),
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Display stats (goals + assists) for players defined in $HOME/.235.config file.",
    )
    return parser


def run(
    options: RenderOptions,
    highlights: Sequence[str],
    *,
    fetcher: Callable[[], Any] = fetch_scores,
    stream: Optional[TextIO] = None,
    is_terminal: Optional[Callable[[], bool]] = None,
) -> int:
    """Fetch, transform and print the latest games. Returns the exit code."""

    out = stream if stream is not None else sys.stdout
    try:
        games = transform_games(parse_feed(fetcher()))
    except FetchError as exc:
        logger.debug("Fetching scores failed (%s): %s", exc.category, exc.detail)
        print(exc.message, file=out)
        return 1
    except FeedError as exc:
        logger.debug("Malformed scores feed: %s", exc)
        print(ERROR_MESSAGES[DECODE], file=out)
        return 1

    print_games(games, options, highlights, stream=out, is_terminal=is_terminal)
    return 0


def main(argv: Optional[List[str]] = None, highlight_path: Optional[Path] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=os.environ.get(LOG_LEVEL_ENV, "WARNING").upper(),
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
    )

    if args.version:
        print(__version__)
        return 0

    options = RenderOptions(
        use_colors=not args.nocolors,
        show_highlights=args.highlight,
        show_stats=args.stats,
    )
    return run(options, read_highlights(highlight_path))
