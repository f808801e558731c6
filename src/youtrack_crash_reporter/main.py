"""CLI entrypoint for the YouTrack crash reporter."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

import requests
from pydantic import ValidationError

from youtrack_crash_reporter import __version__
from youtrack_crash_reporter.config import ReporterSettings
from youtrack_crash_reporter.logging import configure_logging
from youtrack_crash_reporter.service import YouTrackService
from youtrack_crash_reporter.youtrack.errors import YouTrackError

logger = logging.getLogger(__name__)


def _read_payload(source: str) -> dict[str, Any]:
    if source == "-":
        data = json.load(sys.stdin)
    else:
        data = json.loads(Path(source).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError("payload must be a JSON object")
    return data


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="youtrack-crash-reporter",
        description="Report crash-monitoring events into a YouTrack project",
    )
    parser.add_argument(
        "--version", action="version", version=f"youtrack-crash-reporter {__version__}"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("verify", help="Check credentials and that the project exists")

    report = subparsers.add_parser("report", help="Create a YouTrack issue for a crash event")
    report.add_argument(
        "--payload",
        required=True,
        help="Path to a JSON event payload, or '-' to read it from stdin",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = ReporterSettings()
    except ValidationError as e:
        # Logging isn't configured yet; keep it simple and actionable.
        print("Configuration error (check your .env):", file=sys.stderr)
        print(e, file=sys.stderr)
        return 2

    configure_logging(settings.log_level)

    service = YouTrackService(summary_prefix=settings.summary_prefix, timeout=settings.timeout)

    if args.command == "verify":
        ok, message = service.receive_verification(settings.youtrack_config())
        print(message)
        return 0 if ok else 1

    if args.command == "report":
        try:
            payload = _read_payload(args.payload)
            result = service.receive_issue_impact_change(settings.youtrack_config(), payload)
        except (YouTrackError, requests.RequestException):
            logger.exception("Failed to report issue to YouTrack")
            return 1
        except (ValidationError, ValueError, KeyError, OSError) as e:
            print("Configuration error (check your .env and payload):", file=sys.stderr)
            print(e, file=sys.stderr)
            return 2
        print(result["issue_url"])
        return 0

    parser.error(f"Unknown command: {args.command}")


if __name__ == "__main__":
    raise SystemExit(main())
