"""CTF Notice - entry point.

Polls CTFtime for new CTF events and watchlist start times and posts to
Slack.

Usage:
    python main.py check-events      # one new-event check (cron / CI)
    python main.py check-reminders   # one reminder tick (cron, hourly)
    python main.py serve             # slash-command API plus both jobs on a schedule
"""

import argparse
import asyncio
import sys

from apscheduler.schedulers.asyncio import AsyncIOScheduler

import config
from config import ConfigError, validate_config
from logger import logger
from jobs import (
    check_for_new_events,
    check_reminders,
    register_new_event_check,
    register_reminder_check,
)


async def serve(host: str, port: int) -> None:
    """Run the command API with the scheduled jobs in the same event loop."""
    import uvicorn
    from command_api.main import app

    scheduler = AsyncIOScheduler()
    register_reminder_check(scheduler)
    register_new_event_check(scheduler)
    scheduler.start()
    logger.info(f"Scheduler started with {len(scheduler.get_jobs())} jobs")

    server = uvicorn.Server(uvicorn.Config(app, host=host, port=port, log_level="info"))
    try:
        await server.serve()
    finally:
        scheduler.shutdown(wait=False)
        logger.info("Scheduler stopped")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="CTFtime watcher with Slack notifications")
    sub = parser.add_subparsers(dest="action", required=True)

    events = sub.add_parser("check-events", help="Announce newly published CTF events")
    events.add_argument("--days-ahead", type=int, default=None,
                        help=f"Look-ahead window in days (default {config.DAYS_AHEAD})")

    sub.add_parser("check-reminders", help="Send due watchlist reminders")

    srv = sub.add_parser("serve", help="Run the slash-command API and scheduled jobs")
    srv.add_argument("--host", default=config.API_HOST)
    srv.add_argument("--port", type=int, default=config.API_PORT)

    return parser


def main(argv: list[str] = None) -> int:
    args = build_parser().parse_args(argv)
    logger.info(f"CTF Notice starting ({args.action})...")

    try:
        validate_config()
    except ConfigError as e:
        logger.error(f"Configuration error: {e}")
        return 2

    try:
        if args.action == "check-events":
            asyncio.run(check_for_new_events(days_ahead=args.days_ahead))
        elif args.action == "check-reminders":
            asyncio.run(check_reminders())
        elif args.action == "serve":
            asyncio.run(serve(args.host, args.port))
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        return 1

    logger.info("Check complete.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
