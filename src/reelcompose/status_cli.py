"""CLI for render status lookup.

Usage:
    reelcompose status 2abd5c11-0f3d-4c6d-ba20-235fc9b8e8b7
    reelcompose status 2abd5c11-0f3d-4c6d-ba20-235fc9b8e8b7 --json
"""

import argparse
import json

from .cli import report_error, settings_from_env
from .errors import ReelComposeError
from .pipeline import status
from .render import ShotstackClient


def main(args=None):
    parser = argparse.ArgumentParser(
        description="Show the status of a queued render.",
    )
    parser.add_argument(
        "job_id",
        help="Render job id returned by 'reelcompose submit'",
    )
    parser.add_argument(
        "--json", action="store_true",
        help="Print the full status record as JSON",
    )
    parsed = parser.parse_args(args)

    settings = settings_from_env()
    try:
        settings.require("shotstack_host", "shotstack_api_key")
    except ValueError as e:
        parser.error(str(e))

    client = ShotstackClient(settings.shotstack_host, settings.shotstack_api_key)
    try:
        record = status(parsed.job_id, render_client=client)
    except ReelComposeError as e:
        report_error(e)

    if parsed.json:
        print(json.dumps(record, indent=2))
        return

    print(f"Job:    {record.get('id', parsed.job_id)}")
    print(f"Status: {record.get('status', 'unknown')}")
    if record.get("url"):
        print(f"Video:  {record['url']}")
    if record.get("error"):
        print(f"Error:  {record['error']}")


if __name__ == "__main__":
    main()
