#!/usr/bin/env python3
"""
Start the Travel Coordination Hub, or prepare its database.
"""

import sys
import asyncio
import argparse

from travel_hub.config import Settings
from travel_hub.config.loader import load_config_for_environment


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Travel Coordination Hub Server")
    parser.add_argument(
        "--env",
        choices=["development", "staging", "production", "testing"],
        default=None,
        help="Environment to run (default: from ENVIRONMENT env var or development)"
    )
    parser.add_argument("--host", default=None, help="Host to bind to (overrides config)")
    parser.add_argument("--port", type=int, default=None, help="Port to bind to (overrides config)")
    parser.add_argument("--workers", type=int, default=None, help="Worker processes (overrides config)")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    parser.add_argument(
        "--create-tables",
        action="store_true",
        help="Create missing coordination tables in the configured database and exit"
    )
    parser.add_argument(
        "--show-config",
        action="store_true",
        help="Print the effective database and coordination settings and exit"
    )
    return parser


async def create_tables(settings: Settings) -> None:
    from sqlalchemy.ext.asyncio import create_async_engine

    from travel_hub.core.db import create_all_tables

    engine = create_async_engine(settings.database.url, echo=settings.database.echo)
    try:
        await create_all_tables(engine)
    finally:
        await engine.dispose()


def describe(settings: Settings) -> str:
    coordination = settings.coordination
    return "\n".join([
        f"{settings.app_name} v{settings.app_version} ({settings.environment.value})",
        f"  database: {settings.database.url}",
        f"  page size: {coordination.default_page_size} (max {coordination.max_page_size})",
        f"  store timeout: {coordination.request_timeout_seconds}s",
        f"  shuttle bus above: {coordination.large_group_threshold} travelers",
        f"  charter airline: {coordination.charter_airline}",
        f"  drop-off: {coordination.default_dropoff_location}",
    ])


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = load_config_for_environment(args.env)
    except ValueError as e:
        print(f"Failed to load configuration: {e}", file=sys.stderr)
        return 1

    if args.host:
        settings.host = args.host
    if args.port:
        settings.port = args.port
    if args.workers:
        settings.workers = args.workers
    if args.reload:
        settings.reload = True

    if args.show_config:
        print(describe(settings))
        return 0

    if args.create_tables:
        asyncio.run(create_tables(settings))
        print(f"Coordination tables ready in {settings.database.url}")
        return 0

    print(describe(settings))

    import uvicorn

    uvicorn.run(
        "travel_hub.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        workers=settings.workers if not settings.reload else 1,
        log_level=settings.log_level.value.lower(),
        access_log=True,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
