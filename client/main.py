#!/usr/bin/env python3
"""
Command-line form for the clean water backend.

Usage:
  python -m client.main survey --name Alice --usage 120
  python -m client.main issue --location "Ward 7 tap" --problem "Leaking"
  python -m client.main list
  python -m client.main delete-survey 3
  python -m client.main delete-issue 1
"""
from __future__ import annotations

import argparse
import sys
from typing import Any, Dict, List, Optional

import requests

from client.api_client import WaterApiClient


def format_listing(data: Dict[str, Any]) -> str:
    lines = [f"Surveys ({data.get('totalSurveys', 0)})"]
    for s in data.get("surveys", []):
        lines.append(f"  #{s['id']} {s['name']}: {s['usage']} L/day ({s['timestamp']})")
    lines.append(f"Issues ({data.get('totalIssues', 0)})")
    for i in data.get("issues", []):
        lines.append(f"  #{i['id']} {i['location']}: {i['problem']} ({i['timestamp']})")
    lines.append(f"As of {data.get('timestamp', '')}")
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Submit and review water surveys and issue reports")
    ap.add_argument("--api-url", help="Backend base URL (default: WATER_API_URL or http://localhost:5000)")
    sub = ap.add_subparsers(dest="command", required=True)

    survey = sub.add_parser("survey", help="Submit a water usage survey")
    survey.add_argument("--name", required=True)
    survey.add_argument("--usage", required=True, type=int, help="Liters per day")

    issue = sub.add_parser("issue", help="Report a water or sanitation issue")
    issue.add_argument("--location", required=True)
    issue.add_argument("--problem", required=True)

    sub.add_parser("list", help="Show all surveys and issues")

    del_survey = sub.add_parser("delete-survey", help="Delete a survey by id")
    del_survey.add_argument("id", type=int)

    del_issue = sub.add_parser("delete-issue", help="Delete an issue by id")
    del_issue.add_argument("id", type=int)
    return ap


def main(argv: Optional[List[str]] = None, client: Optional[WaterApiClient] = None) -> None:
    args = build_parser().parse_args(argv)
    client = client or WaterApiClient(base_url=args.api_url)

    if args.command == "list":
        print(format_listing(client.fetch_all_data()))
        return

    if args.command == "survey":
        result = client.submit_survey(args.name.strip(), args.usage)
    elif args.command == "issue":
        result = client.report_issue(args.location.strip(), args.problem.strip())
    elif args.command == "delete-survey":
        result = client.delete_survey(args.id)
    else:
        result = client.delete_issue(args.id)
    print(result["message"])


def cli(argv: Optional[List[str]] = None) -> None:
    """Console entry point: report failures as one line on stderr and exit 1."""
    try:
        main(argv)
    except (requests.RequestException, ValueError) as exc:
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)


if __name__ == "__main__":
    cli()
