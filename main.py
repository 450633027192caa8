"""
Review Monitor - marketplace profile review watcher

CLI entry point that polls the profile page at a fixed interval.
"""

import argparse
import asyncio
import logging
import sys

from src.models.account import Account
from src.models.event import NewReviewEvent
from src.orchestrator import ReviewMonitor
from src.utils.event_bus import EventBus
from src.utils.http_client import FetchError, FunpayHttpClient
import config.settings as settings

logger = logging.getLogger(__name__)


def setup_logging(log_level: str = "INFO", log_file: str = settings.LOG_FILE):
    """Configure logging for the entire application."""
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format=settings.LOG_FORMAT,
        handlers=handlers
    )


def log_new_review(event: NewReviewEvent) -> None:
    logger.info(f"[{event.detected_at}] New review: {event.review.to_dict()}")


async def run_forever(monitor: ReviewMonitor, interval_seconds: float) -> None:
    """Tick the monitor forever; a failed tick waits for the next one."""
    while True:
        try:
            await monitor.tick()
        except FetchError as e:
            logger.warning(f"Tick failed, retrying in {interval_seconds}s: {e}")
        except Exception as e:
            logger.error(f"Tick crashed, retrying in {interval_seconds}s: {e}", exc_info=True)
        await asyncio.sleep(interval_seconds)


async def run(args: argparse.Namespace, account: Account) -> None:
    event_bus = EventBus()
    event_bus.subscribe(log_new_review)

    async with FunpayHttpClient(base_url=args.base_url, timeout=args.timeout) as client:
        monitor = ReviewMonitor(client, account, event_bus)

        if args.stats:
            stats = await monitor.get_review_stats()
            for rating, count in stats.items():
                print(f"{rating}: {count}")
            return

        if args.once:
            await monitor.tick()
            return

        await run_forever(monitor, args.interval)


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Watch a marketplace profile page for new reviews",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Credentials are read from the environment:
  {settings.USER_ID_ENV}, {settings.GOLDEN_KEY_ENV}, {settings.PHPSESSID_ENV}

Examples:
  # Poll every 30 seconds
  python main.py --interval 30

  # Print the rating histogram and exit
  python main.py --stats
        """
    )

    parser.add_argument(
        "--interval",
        type=float,
        default=settings.TICK_INTERVAL_SECONDS,
        help=f"Seconds between cycles (default: {settings.TICK_INTERVAL_SECONDS})"
    )

    parser.add_argument(
        "--base-url",
        default=settings.BASE_URL,
        help=f"Marketplace root URL (default: {settings.BASE_URL})"
    )

    parser.add_argument(
        "--timeout",
        type=float,
        default=settings.REQUEST_TIMEOUT_SECONDS,
        help=f"Request timeout in seconds (default: {settings.REQUEST_TIMEOUT_SECONDS})"
    )

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--once", action="store_true", help="Run a single cycle and exit")
    mode.add_argument("--stats", action="store_true", help="Print rating counts and exit")

    parser.add_argument(
        "--log-level",
        default=settings.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help=f"Logging level (default: {settings.LOG_LEVEL})"
    )

    args = parser.parse_args()

    setup_logging(args.log_level)

    try:
        account = Account.from_env()
    except ValueError as e:
        logger.error(f"Invalid account configuration: {e}")
        sys.exit(1)

    try:
        asyncio.run(run(args, account))
    except KeyboardInterrupt:
        logger.warning("Monitor interrupted by user")
        sys.exit(1)
    except FetchError as e:
        logger.error(f"Fetch failed: {e}")
        sys.exit(1)

    sys.exit(0)


if __name__ == "__main__":
    main()
