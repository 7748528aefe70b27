"""CLI for running room detection over a blueprint snapshot file."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from blueprint_engine.config import get_settings
from blueprint_engine.core.exceptions import InvalidBlueprintError
from blueprint_engine.geometry.dimensioning import format_area
from blueprint_engine.models.schemas.blueprint import parse_blueprint
from blueprint_engine.services.room_analysis import analysis_to_dict, analyze_blueprint

logger = logging.getLogger(__name__)


def load_snapshot_payload(path: Path) -> Any:
    """Read a snapshot file; ``{"data": {...}}`` response envelopes are unwrapped."""
    with path.open(encoding="utf-8") as fh:
        payload = json.load(fh)

    if isinstance(payload, dict) and isinstance(payload.get("data"), dict):
        return payload["data"]
    return payload


def run_detection(path: Path, pretty: bool = False) -> int:
    """
    Analyze one snapshot file and print the result as JSON.

    Args:
        path: Blueprint snapshot JSON file
        pretty: Indent the JSON output

    Returns:
        Process exit code
    """
    if not path.is_file():
        logger.error(f"File not found: {path}")
        return 1

    try:
        payload = load_snapshot_payload(path)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.error(f"Invalid JSON in {path}: {e}")
        return 1
    except OSError as e:
        logger.error(f"Could not read {path}: {e}")
        return 1

    try:
        snapshot = parse_blueprint(payload)
    except InvalidBlueprintError as e:
        logger.error(e.detail)
        return 1

    analysis = analyze_blueprint(snapshot)

    for warning in analysis.warnings:
        logger.warning(warning)
    for room in analysis.rooms:
        logger.info(f"  {room.name}: {room.type.value}, {format_area(room.area)}")

    print(json.dumps(analysis_to_dict(analysis), indent=2 if pretty else None))
    return 0


def main(argv=None):
    """CLI entry point."""
    settings = get_settings()

    parser = argparse.ArgumentParser(
        description=(
            f"{settings.app_name} {settings.app_version}: "
            "detect rooms in a blueprint snapshot"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m blueprint_engine.cli.detect blueprint.json
  python -m blueprint_engine.cli.detect --pretty blueprint.json
  python -m blueprint_engine.cli.detect -v blueprint.json
        """,
    )

    parser.add_argument(
        "snapshot",
        help="Blueprint snapshot JSON file (corners, walls, furniture)",
    )

    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Indent JSON output",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    sys.exit(run_detection(Path(args.snapshot), pretty=args.pretty))


if __name__ == "__main__":
    main()
