"""CLI for submitting a video.

Searches photos for a query, composes the timeline for the chosen
template, and queues the render. With --dry-run the render request is
printed (or written to --output) instead of submitted.

Usage:
    # Queue a render with the default template
    reelcompose submit --search "mountain lake" --title "Summer Trip" \
        --soundtrack disco

    # Reproducible random selection, payload only
    reelcompose submit --search beach --title Holiday --soundtrack lit \
        --template shuffle --seed 7 --dry-run --output payload.json
"""

import argparse
import json
import random
import sys
from pathlib import Path

from dotenv import load_dotenv

from .config import Settings, configure_logging, load_settings
from .errors import ReelComposeError
from .manifest import load_registry
from .pipeline import preview, submit
from .render import ShotstackClient
from .search import PexelsClient


# ── Shared CLI helpers ────────────────────────────────────────────


def settings_from_env() -> Settings:
    """Load .env, read settings, and configure logging."""
    load_dotenv()
    settings = load_settings()
    configure_logging(settings.log_level)
    return settings


def report_error(error: ReelComposeError) -> None:
    """Print a rejected outcome and exit non-zero."""
    print(f"error [{error.kind}]: {error.message}", file=sys.stderr)
    sys.exit(1)


# ── CLI entry point ───────────────────────────────────────────────


def main(args=None):
    parser = argparse.ArgumentParser(
        description="Compose a photo slideshow timeline and queue it for rendering.",
    )
    parser.add_argument(
        "--search", required=True,
        help="Photo search query (letters, digits and spaces)",
    )
    parser.add_argument(
        "--title", required=True,
        help="Title shown at the start of the video",
    )
    parser.add_argument(
        "--soundtrack", required=True,
        help="Soundtrack key from the template (e.g. disco, lit)",
    )
    parser.add_argument(
        "--template", default=None,
        help="Template id (default: the manifest's default template)",
    )
    parser.add_argument(
        "--seed", type=int, default=None,
        help="Seed for templates that pick photos at random",
    )
    parser.add_argument(
        "--dry-run", action="store_true",
        help="Print the render request instead of submitting it",
    )
    parser.add_argument(
        "--output", default=None,
        help="With --dry-run, write the render request JSON here",
    )
    parsed = parser.parse_args(args)

    if parsed.output and not parsed.dry_run:
        parser.error("--output is only valid with --dry-run")

    settings = settings_from_env()
    try:
        settings.require("pexels_api_key")
        if not parsed.dry_run:
            settings.require("shotstack_host", "shotstack_api_key")
        registry = load_registry(settings.templates_path, settings.template_paths())
    except (ValueError, OSError) as e:
        parser.error(str(e))

    request = {
        "search": parsed.search,
        "title": parsed.title,
        "soundtrack": parsed.soundtrack,
    }
    if parsed.template:
        request["template"] = parsed.template

    search_client = PexelsClient(settings.pexels_api_key)
    rng = random.Random(parsed.seed) if parsed.seed is not None else None

    try:
        if parsed.dry_run:
            payload = preview(
                request, search_client=search_client, registry=registry, rng=rng,
            )
            text = json.dumps(payload, indent=2)
            if parsed.output:
                Path(parsed.output).parent.mkdir(parents=True, exist_ok=True)
                Path(parsed.output).write_text(text + "\n")
                print(f"Render request written to: {parsed.output}")
            else:
                print(text)
            return

        render_client = ShotstackClient(settings.shotstack_host, settings.shotstack_api_key)
        print(f"Composing '{parsed.title}' from photos of '{parsed.search}'...")
        job_id = submit(
            request,
            search_client=search_client,
            render_client=render_client,
            registry=registry,
            rng=rng,
        )
    except ReelComposeError as e:
        report_error(e)

    print(f"Render queued: {job_id}")
    print(f"Check progress with: reelcompose status {job_id}")


if __name__ == "__main__":
    main()
