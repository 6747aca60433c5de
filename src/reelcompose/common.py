"""reelcompose.common — shared utilities for template manifests.

Contains: hex color validation and ${var} substitution for asset URLs.
"""

import re


_HEX_RE = re.compile(r"^#?[0-9a-fA-F]{6}$")


# ── Color utilities ────────────────────────────────────────────────

def parse_hex_color(hex_str: str) -> tuple[int, int, int]:
    """Convert '#RRGGBB' or 'RRGGBB' string to (R, G, B) tuple."""
    if not isinstance(hex_str, str) or not _HEX_RE.match(hex_str):
        raise ValueError(f"Invalid hex color: {hex_str!r}")
    hex_str = hex_str.lstrip("#")
    return (int(hex_str[0:2], 16), int(hex_str[2:4], 16), int(hex_str[4:6], 16))


def normalize_hex_color(hex_str: str) -> str:
    """Return the color as '#rrggbb', the form the render service expects."""
    r, g, b = parse_hex_color(hex_str)
    return f"#{r:02x}{g:02x}{b:02x}"


# ── Path utilities ─────────────────────────────────────────────────

def resolve_path_vars(text: str, paths: dict[str, str]) -> str:
    """Replace ${name} variables in a string using the paths dict.

    Trailing slashes on the substituted value are dropped so that
    "${assets}/music" never produces a double slash.
    """
    def _replace(match):
        key = match.group(1)
        if key not in paths:
            raise ValueError(f"Unknown path variable: ${{{key}}}")
        return str(paths[key]).rstrip("/")
    return re.sub(r"\$\{(\w+)\}", _replace, text)


def resolve_all(obj, paths: dict[str, str]):
    """Recursively resolve ${var} in all string values of a YAML tree."""
    if isinstance(obj, str):
        return resolve_path_vars(obj, paths)
    elif isinstance(obj, dict):
        return {k: resolve_all(v, paths) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [resolve_all(item, paths) for item in obj]
    return obj
