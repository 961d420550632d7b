# -*- coding: utf-8 -*-
"""
Command line tool for running and seeding the NutriScan API.

Usage:
    nutriscan serve [--host HOST] [--port PORT] [--reload]
    nutriscan init-db
    nutriscan seed [--with-history] [--days 90]
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from datetime import timedelta

from .config import settings

logger = logging.getLogger("nutriscan.cli")

MEAL_ORDER = ["BREAKFAST", "LUNCH", "DINNER", "SNACK"]
DEFAULT_BASE_WEIGHT_KG = 70.0


def cmd_serve(args: argparse.Namespace) -> int:
    """Run the API with uvicorn."""
    import uvicorn

    uvicorn.run(
        "nutriscan.api:app",
        host=args.host or settings.host,
        port=args.port or settings.port,
        reload=args.reload,
    )
    return 0


def cmd_init_db(args: argparse.Namespace) -> int:
    """Create the database tables."""
    from .app_db import init_app_db

    init_app_db(settings.db_path)
    print(f"Database ready: {settings.db_path}")
    return 0


def _generate_history(user: dict, foods: list, days: int, rng: random.Random) -> int:
    from .logs.storage import add_log, clear_user_logs
    from .metrics.storage import clear_user_metrics, upsert_metric
    from .users.storage import get_profile
    from .utils import utc_today

    clear_user_logs(user["id"])
    clear_user_metrics(user["id"])

    profile = get_profile(user["id"])
    base_weight = float(profile["weight"]) if profile else DEFAULT_BASE_WEIGHT_KG
    today = utc_today()
    logged = 0
    for day_offset in range(days):
        day = today - timedelta(days=day_offset)
        meals_today = rng.randint(2, 4)
        for meal in range(meals_today):
            food = rng.choice(foods)
            add_log(
                user_id=user["id"],
                food_id=food["id"],
                quantity=1.5 if rng.random() > 0.7 else 1.0,
                meal_type=MEAL_ORDER[min(meal, len(MEAL_ORDER) - 1)],
                day=day,
            )
            logged += 1
        upsert_metric(
            user_id=user["id"],
            day=day,
            weight_recorded=round(base_weight + rng.uniform(-1.0, 1.0) - day_offset * 0.02, 2),
            water_intake=round(1.5 + rng.random() * 1.5, 2),
            sleep_minutes=360 + rng.randrange(180),
        )
    return logged


def cmd_seed(args: argparse.Namespace) -> int:
    """Load the bundled food catalog and optionally fake history for every user."""
    from .app_db import init_app_db
    from .auth.storage import list_users
    from .foods.storage import load_catalog, replace_catalog

    init_app_db(settings.db_path)
    foods = replace_catalog(load_catalog())
    logger.info("Seeded %d catalog foods", len(foods))

    if not args.with_history:
        return 0
    if args.days < 1:
        logger.error("--days must be at least 1")
        return 1

    rng = random.Random(args.random_seed)
    for user in list_users():
        count = _generate_history(user, foods, args.days, rng)
        logger.info("%s: %d logs over %d days", user["email"], count, args.days)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="NutriScan API CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        help=f"Logging level (default: {settings.log_level})",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # serve command
    serve_parser = subparsers.add_parser("serve", help="Run the HTTP server")
    serve_parser.add_argument("--host", help=f"Bind host (default: {settings.host})")
    serve_parser.add_argument("--port", type=int, help=f"Bind port (default: {settings.port})")
    serve_parser.add_argument("--reload", action="store_true", help="Reload on code changes")

    # init-db command
    subparsers.add_parser("init-db", help="Create database tables")

    # seed command
    seed_parser = subparsers.add_parser("seed", help="Load the food catalog")
    seed_parser.add_argument(
        "--with-history",
        action="store_true",
        help="Also generate random logs and metrics for every user",
    )
    seed_parser.add_argument(
        "--days",
        type=int,
        default=90,
        help="Days of history to generate (default: 90)",
    )
    seed_parser.add_argument("--random-seed", type=int, default=None, help=argparse.SUPPRESS)

    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    if not args.command:
        parser.print_help()
        return 1

    commands = {
        "serve": cmd_serve,
        "init-db": cmd_init_db,
        "seed": cmd_seed,
    }

    return commands[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
