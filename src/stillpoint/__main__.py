"""Stillpoint entry point.

Usage:
    python -m stillpoint [OPTIONS]

Options:
    --history PATH   JSON file with practice history
    --user ID        Load history for a user from MongoDB
    --at TIME        ISO-8601 time to recommend for (default: now)
    --limit N        Number of recommendations
    --patterns       Print the pattern profile instead of recommendations
    --config PATH    Path to YAML config file
    --profile NAME   Profile name (dev, prod, test)
    --version        Show version
"""

from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (parent of src/), else the current directory
_env_file = Path(__file__).parent.parent.parent / ".env"
if _env_file.exists():
    load_dotenv(_env_file)
else:
    load_dotenv()

import argparse  # noqa: E402
import json  # noqa: E402
import logging  # noqa: E402
import sys  # noqa: E402
from collections.abc import Sequence  # noqa: E402
from datetime import datetime  # noqa: E402

from . import __version__  # noqa: E402
from .catalog import CatalogAccessor, builtin_catalog, load_catalog  # noqa: E402
from .config import StillpointConfig  # noqa: E402
from .config.loader import load_config  # noqa: E402
from .engine import Recommender, summarize_mood  # noqa: E402
from .errors import StillpointError, StorageUnavailableError  # noqa: E402
from .history import HistoryEntry, load_history, parse_timestamp  # noqa: E402


def setup_logging(level: str) -> None:
    """Configure logging based on config."""
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="stillpoint",
        description="Stillpoint - adaptive practice recommendations",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m stillpoint --history history.json             # Top 3 for now
  python -m stillpoint --history history.json --limit 5   # Top 5
  python -m stillpoint --history history.json --patterns  # Pattern profile
  python -m stillpoint --profile prod --user alice        # History from MongoDB

Environment:
  STILLPOINT_PROFILE     Set profile (dev, prod, test)
  STILLPOINT_MONGO_URI   Override the MongoDB connection URI
""",
    )

    source = parser.add_mutually_exclusive_group()
    source.add_argument("--history", type=Path, metavar="PATH", help="JSON history file")
    source.add_argument("--user", metavar="ID", help="Load history for a user from MongoDB")

    parser.add_argument("--at", metavar="TIME", help="ISO-8601 time to recommend for")
    parser.add_argument("--limit", type=int, help="Number of recommendations")
    parser.add_argument("--catalog", type=Path, metavar="PATH", help="YAML catalog file")
    parser.add_argument(
        "--patterns",
        action="store_true",
        help="Print the pattern profile and mood summary instead",
    )
    parser.add_argument("--config", type=Path, metavar="PATH", help="Path to YAML config file")
    parser.add_argument(
        "--profile",
        choices=["dev", "prod", "test"],
        help="Configuration profile to use",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"Stillpoint v{__version__}",
    )

    return parser.parse_args(argv)


def build_catalog(args: argparse.Namespace, config: StillpointConfig) -> CatalogAccessor:
    """Pick the catalog from --catalog, then config, then the built-in one."""
    path = args.catalog or config.catalog.path
    if path:
        return load_catalog(path)
    return builtin_catalog()


def fetch_history(
    args: argparse.Namespace,
    config: StillpointConfig,
    logger: logging.Logger,
) -> list[HistoryEntry]:
    """Load history from a file or, with --user, from MongoDB."""
    if args.history:
        return load_history(args.history)

    if args.user:
        if not config.storage.enabled:
            raise StillpointError("Storage is disabled in this profile; use --history or --profile prod")

        # Imported here so file-based runs never touch pymongo
        from pymongo.errors import PyMongoError

        from .storage import MongoStorageClient

        try:
            with MongoStorageClient(config.storage) as storage:
                return storage.history.get_history(args.user)
        except PyMongoError as e:
            raise StorageUnavailableError(f"Could not load history for '{args.user}': {e}") from e

    logger.info("No history given, recommending for a new user")
    return []


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for Stillpoint.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    args = parse_args(argv)

    try:
        if args.config:
            config = load_config(path=args.config)
        else:
            config = load_config(profile=args.profile)
    except FileNotFoundError as e:
        print(f"Error: Config file not found: {e}", file=sys.stderr)
        return 1
    except (TypeError, ValueError) as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    setup_logging(config.logging.level)
    logger = logging.getLogger("stillpoint")
    logger.debug(f"Stillpoint v{__version__}, log level {config.logging.level}")

    now = datetime.now()
    if args.at:
        parsed = parse_timestamp(args.at)
        if parsed is None:
            print(f"Error: Invalid time '{args.at}'. Use ISO-8601.", file=sys.stderr)
            return 1
        now = parsed

    try:
        catalog = build_catalog(args, config)
        history = fetch_history(args, config, logger)
        recommender = Recommender(catalog, config.engine, clock=lambda: now)

        if args.patterns:
            output = {
                "patterns": recommender.analyze(history).to_dict(),
                "mood": _mood_to_dict(history, now),
            }
        else:
            recommendations = recommender.top_recommendations(history, limit=args.limit)
            output = {
                "at": now.isoformat(),
                "recommendations": [r.to_dict() for r in recommendations],
            }
    except StillpointError as e:
        logger.error(str(e))
        return 1

    print(json.dumps(output, indent=2))
    return 0


def _mood_to_dict(history: list[HistoryEntry], now: datetime) -> dict[str, object]:
    summary = summarize_mood(history, now)
    return {
        "average_mood_improvement": summary.average_mood_improvement,
        "average_energy_improvement": summary.average_energy_improvement,
        "sessions_with_mood_data": summary.sessions_with_mood_data,
        "total_sessions": summary.total_sessions,
        "trend": summary.trend.value,
        "improvement_rate": summary.improvement_rate,
    }


if __name__ == "__main__":
    sys.exit(main())
