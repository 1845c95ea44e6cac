from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from crdready.app import wait_for_resource_definitions
from crdready.config import (
    ConfigurationError,
    configure_logging,
    get_backoff_config,
    make_backoff_config,
)
from crdready.domain.errors import AggregateEstablishmentError

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from crdready.config import BackoffConfig

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Wait for CustomResourceDefinitions to become established"
    )
    parser.add_argument(
        "names",
        nargs="+",
        metavar="NAME",
        help="CustomResourceDefinition name, e.g. foos.example.io",
    )
    parser.add_argument(
        "--max-attempts",
        type=int,
        help="Number of status fetches per definition before giving up",
    )
    parser.add_argument(
        "--initial-interval",
        type=float,
        help="Seconds to wait after the first unsuccessful fetch",
    )
    parser.add_argument(
        "--backoff-factor",
        type=float,
        help="Multiplier applied to the wait after every attempt",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every poll attempt",
    )
    return parser.parse_args(list(argv))


def _build_backoff(args: argparse.Namespace) -> BackoffConfig:
    backoff = get_backoff_config()
    return make_backoff_config(
        max_attempts=backoff.max_attempts if args.max_attempts is None else args.max_attempts,
        initial_interval=(
            backoff.initial_interval if args.initial_interval is None else args.initial_interval
        ),
        factor=backoff.factor if args.backoff_factor is None else args.backoff_factor,
    )


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(verbose=parsed_args.verbose)

    try:
        backoff = _build_backoff(parsed_args)
    except ConfigurationError:
        log.exception("Configuration error")
        sys.exit(2)

    try:
        wait_for_resource_definitions(parsed_args.names, backoff=backoff)
    except ConfigurationError:
        log.exception("Configuration error")
        sys.exit(2)
    except AggregateEstablishmentError as exc:
        for error in exc.errors:
            log.error(str(error))  # noqa: TRY400
        sys.exit(1)
    except Exception:
        log.exception("Fatal error while waiting for CustomResourceDefinitions")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(130)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
