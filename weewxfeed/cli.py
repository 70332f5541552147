"""CLI entry point for the weewx RSS weather feed reader."""

import argparse
import asyncio
import logging

from pydantic import ValidationError

from weewxfeed.config.loader import get_config_value, load_config
from weewxfeed.config.schema import WeewxConfig
from weewxfeed.ingest.weewx_api import WeewxRssAPI
from weewxfeed.ingest.weewx_client import FeedFetchError, WeewxClient
from weewxfeed.models.feed import FeedParseError
from weewxfeed.reporting.formatters import format_report_json, format_report_text
from weewxfeed.reporting.health_checker import FeedHealthChecker


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="weewxfeed",
        description="Read current conditions from a weewx RSS feed",
    )
    parser.add_argument("--config", default=None, help="Config YAML path")
    parser.add_argument("--location", default=None, help="Feed URL override")
    parser.add_argument(
        "--debug", action="store_true", help="Enable debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    # report
    report_p = sub.add_parser("report", help="Fetch and print the current report")
    report_p.add_argument(
        "--format", choices=["text", "json"], default="text", help="Output format"
    )

    # health
    sub.add_parser("health", help="Check the feed is reachable")

    # config show / config get
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    get_p = config_sub.add_parser("get", help="Print a config value")
    get_p.add_argument("key", help="Dotted key, e.g. feed.location")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    try:
        config = load_config(args.config)
    except (OSError, ValidationError) as e:
        print(f"Error: {e}")
        return 1
    if args.location:
        config = config.model_copy(
            update={"feed": config.feed.model_copy(update={"location": args.location})}
        )

    logging.basicConfig(
        level=logging.DEBUG if args.debug else config.logging.level.value,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "report":
        return _cmd_report(config, args)
    elif args.command == "health":
        return _cmd_health(config)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_report(config: WeewxConfig, args) -> int:
    client = WeewxClient(
        user_agent=config.feed.user_agent,
        timeout=config.feed.timeout_seconds,
    )
    api = WeewxRssAPI(config.feed.location, client=client)
    try:
        result = asyncio.run(api.update())
    except (FeedFetchError, FeedParseError) as e:
        print(f"Error: {e}")
        return 1

    if args.format == "json":
        print(format_report_json(result))
    else:
        print(format_report_text(result, api.attribution))
    return 0


def _cmd_health(config: WeewxConfig) -> int:
    checker = FeedHealthChecker(
        config.feed.location,
        user_agent=config.feed.user_agent,
        timeout=config.feed.timeout_seconds,
    )
    status = checker.check()

    print(f"Feed: {status.location}")
    print(f"Reachable: {'OK' if status.reachable else 'FAIL'}")
    if status.status_code is not None:
        print(f"HTTP status: {status.status_code}")
    print(f"Items: {status.items_found}")
    if status.error:
        print(f"Error: {status.error}")
    return 0 if status.reachable and status.error is None else 1


def _cmd_config(config: WeewxConfig, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "get":
        try:
            print(get_config_value(config, args.key))
            return 0
        except KeyError as e:
            print(f"Error: {e}")
            return 1
    else:
        print("Use: config show | config get key")
        return 1
