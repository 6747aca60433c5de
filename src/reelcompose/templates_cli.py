"""CLI for inspecting template manifests.

Usage:
    # List the packaged templates
    reelcompose templates

    # Validate a custom manifest and show its timings
    reelcompose templates --manifest my-templates.yaml --validate
"""

import argparse

from .manifest import load_registry


def main(args=None):
    parser = argparse.ArgumentParser(
        description="List or validate video style templates.",
    )
    parser.add_argument(
        "--manifest", default=None,
        help="Template manifest path (default: packaged templates)",
    )
    parser.add_argument(
        "--validate", action="store_true",
        help="Only check the manifest and report the template count",
    )
    parsed = parser.parse_args(args)

    try:
        registry = load_registry(parsed.manifest)
    except (ValueError, OSError) as e:
        parser.error(str(e))

    if parsed.validate:
        print(f"Template manifest valid: {len(registry)} templates")
        return

    for t in registry:
        tag = " (default)" if t.id == registry.default_id else ""
        print(
            f"  {t.id}{tag}: {t.clip_count} x {t.clip_length}s clips, "
            f"{t.title_length}s title, {t.layout_policy}, {t.selection}, "
            f"~{t.duration}s"
        )
        print(f"      soundtracks: {', '.join(sorted(t.soundtracks))}")


if __name__ == "__main__":
    main()
