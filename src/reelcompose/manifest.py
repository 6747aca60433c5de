"""Template manifest loader.

Parses the YAML template catalogue, resolves ${path} variables in asset
URLs, applies the shared defaults to every template and validates the
result into immutable Template objects.

Template manifest schema:
  paths:
    assets: "https://example-bucket.s3.amazonaws.com"
  defaults:                     # applied to every template unless overridden
    luma_length: 2
    soundtracks:
      disco: "${assets}/music/disco.mp3"
    output: {format: mp4, resolution: sd}
  default_template: zoom
  templates:
    - id: zoom
      clip_count: 6
      title_length: 3
      clip_length: 4
      layout_policy: overlay    # or "trim"
      effect_cycle: [zoomIn, slideUp]
      luma_cycle: ["${assets}/luma-mattes/circles/center-double.mp4"]
      title_style: {style: chunk, size: small, effect: zoomIn}
"""

from pathlib import Path

import yaml

from .common import normalize_hex_color, resolve_all
from .templates import (
    SELECT_RANDOM,
    VALID_LAYOUT_POLICIES,
    VALID_SELECTION_MODES,
    Template,
    TemplateRegistry,
    TitleStyle,
)


PACKAGED_MANIFEST = Path(__file__).resolve().parent / "templates.yaml"

REQUIRED_FIELDS = (
    "id", "clip_count", "title_length", "clip_length", "luma_length",
    "luma_cycle", "soundtracks",
)

VALID_ORIENTATIONS = {"landscape", "portrait", "square"}

VALID_RESOLUTIONS = {"preview", "mobile", "sd", "hd", "1080"}

VALID_FORMATS = {"mp4", "gif", "mp3"}

TITLE_STYLE_FIELDS = {
    "style", "size", "effect", "transition_in", "transition_out", "uppercase",
}

# Dict-valued fields merge key-by-key with the defaults instead of replacing.
_MERGED_FIELDS = {"title_style", "output"}


# ── Manifest loading ──────────────────────────────────────────────


def load_template_manifest(
    manifest_path: str | Path = PACKAGED_MANIFEST,
    paths: dict[str, str] | None = None,
) -> dict:
    """Load, validate, and normalize a template manifest.

    Processing pipeline:
      1. Parse YAML.
      2. Overlay caller-supplied path variables on the manifest's own.
      3. Resolve ${path} variables in every string value.
      4. Merge the shared defaults into each template.
      5. Validate each template and build Template objects.

    Args:
        manifest_path: Path to the YAML template manifest.
        paths: Extra path variables; these win over the manifest's.

    Returns:
        {"default_template": str | None, "templates": list[Template]}

    Raises:
        ValueError: Missing/invalid fields, or unparseable YAML.
        FileNotFoundError: Missing manifest file.
    """
    with open(manifest_path) as f:
        try:
            raw = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Template manifest: invalid YAML in {manifest_path}: {e}") from None

    if not isinstance(raw, dict):
        raise ValueError("Template manifest: top level must be a mapping")
    if not raw.get("templates"):
        raise ValueError("Template manifest: missing required 'templates' list")

    variables = dict(raw.get("paths") or {})
    variables.update(paths or {})

    defaults = resolve_all(raw.get("defaults") or {}, variables)
    if not isinstance(defaults, dict):
        raise ValueError("Template manifest: 'defaults' must be a mapping")

    templates = []
    for i, entry in enumerate(raw["templates"]):
        if not isinstance(entry, dict):
            raise ValueError(f"Template {i}: must be a mapping")
        merged = _apply_defaults(resolve_all(entry, variables), defaults)
        templates.append(_build_template(merged, i))

    return {
        "default_template": raw.get("default_template"),
        "templates": templates,
    }


def load_registry(
    manifest_path: str | Path | None = None,
    paths: dict[str, str] | None = None,
) -> TemplateRegistry:
    """Build a TemplateRegistry from a manifest (packaged one by default)."""
    config = load_template_manifest(manifest_path or PACKAGED_MANIFEST, paths)
    return TemplateRegistry(config["templates"], config["default_template"])


_default_registry = None


def default_registry() -> TemplateRegistry:
    """Return the registry for the packaged templates, loaded once."""
    global _default_registry
    if _default_registry is None:
        _default_registry = load_registry()
    return _default_registry


def _apply_defaults(entry: dict, defaults: dict) -> dict:
    merged = dict(defaults)
    for key, value in entry.items():
        base = defaults.get(key)
        if key in _MERGED_FIELDS and isinstance(value, dict) and isinstance(base, dict):
            merged[key] = {**base, **value}
        else:
            merged[key] = value
    return merged


# ── Validation ────────────────────────────────────────────────────


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _build_template(entry: dict, index: int) -> Template:
    """Validate one merged template dict and return a Template."""
    tid = entry.get("id")
    prefix = f"Template {index} ({tid})" if tid else f"Template {index}"

    for name in REQUIRED_FIELDS:
        if name not in entry:
            raise ValueError(f"{prefix}: missing required field '{name}'")

    if not isinstance(tid, str) or not tid.strip():
        raise ValueError(f"{prefix}: 'id' must be a non-empty string")

    clip_count = entry["clip_count"]
    if not isinstance(clip_count, int) or isinstance(clip_count, bool) or clip_count < 1:
        raise ValueError(f"{prefix}: clip_count must be a positive integer, got {clip_count!r}")

    min_clips = entry.get("min_clips", clip_count)
    if not isinstance(min_clips, int) or not (1 <= min_clips <= clip_count):
        raise ValueError(
            f"{prefix}: min_clips must be between 1 and clip_count ({clip_count}), "
            f"got {min_clips!r}"
        )

    for name in ("title_length", "clip_length", "luma_length"):
        value = entry[name]
        if not _is_number(value) or value <= 0:
            raise ValueError(f"{prefix}: {name} must be a positive number, got {value!r}")

    policy = entry.get("layout_policy", "overlay")
    if policy not in VALID_LAYOUT_POLICIES:
        raise ValueError(
            f"{prefix}: invalid layout_policy '{policy}'. "
            f"Valid: {sorted(VALID_LAYOUT_POLICIES)}"
        )

    effect_cycle = entry.get("effect_cycle") or []
    luma_cycle = entry["luma_cycle"] or []
    for name, cycle in (("effect_cycle", effect_cycle), ("luma_cycle", luma_cycle)):
        if not isinstance(cycle, list) or not all(isinstance(c, str) for c in cycle):
            raise ValueError(f"{prefix}: '{name}' must be a list of strings")
    if clip_count > 1 and not luma_cycle:
        raise ValueError(f"{prefix}: luma_cycle needs at least one matte")

    soundtracks = entry["soundtracks"]
    if not isinstance(soundtracks, dict) or not soundtracks:
        raise ValueError(f"{prefix}: 'soundtracks' must be a non-empty mapping")
    for key, url in soundtracks.items():
        if not isinstance(url, str) or not url:
            raise ValueError(f"{prefix}: soundtrack '{key}' must be a URL string")

    selection = entry.get("selection", "sequential")
    if selection not in VALID_SELECTION_MODES:
        raise ValueError(
            f"{prefix}: invalid selection '{selection}'. "
            f"Valid: {sorted(VALID_SELECTION_MODES)}"
        )

    max_results = entry.get("max_results", clip_count)
    if not isinstance(max_results, int) or max_results < clip_count:
        raise ValueError(
            f"{prefix}: max_results must be an integer >= clip_count ({clip_count}), "
            f"got {max_results!r}"
        )
    if selection != SELECT_RANDOM:
        max_results = clip_count

    search_length = _parse_bounds(entry.get("search_length", [2, 30]), prefix, "search_length")
    title_bounds = _parse_bounds(
        entry.get("title_length_bounds", [2, 30]), prefix, "title_length_bounds",
    )

    orientation = entry.get("orientation", "landscape")
    if orientation not in VALID_ORIENTATIONS:
        raise ValueError(
            f"{prefix}: invalid orientation '{orientation}'. "
            f"Valid: {sorted(VALID_ORIENTATIONS)}"
        )

    try:
        background = normalize_hex_color(entry.get("background", "#000000"))
    except ValueError as e:
        raise ValueError(f"{prefix}: {e}") from None

    output = entry.get("output") or {}
    if not isinstance(output, dict):
        raise ValueError(f"{prefix}: 'output' must be a mapping")
    output_format = output.get("format", "mp4")
    if output_format not in VALID_FORMATS:
        raise ValueError(
            f"{prefix}: invalid output format '{output_format}'. "
            f"Valid: {sorted(VALID_FORMATS)}"
        )
    resolution = output.get("resolution", "sd")
    if resolution not in VALID_RESOLUTIONS:
        raise ValueError(
            f"{prefix}: invalid output resolution '{resolution}'. "
            f"Valid: {sorted(VALID_RESOLUTIONS)}"
        )

    return Template(
        id=tid,
        clip_count=clip_count,
        min_clips=min_clips,
        title_length=entry["title_length"],
        clip_length=entry["clip_length"],
        luma_length=entry["luma_length"],
        effect_cycle=tuple(effect_cycle),
        luma_cycle=tuple(luma_cycle),
        soundtracks=soundtracks,
        layout_policy=policy,
        entry_fade=bool(entry.get("entry_fade", False)),
        title_style=_parse_title_style(entry.get("title_style") or {}, prefix),
        selection=selection,
        max_results=max_results,
        search_length=search_length,
        title_length_bounds=title_bounds,
        orientation=orientation,
        background=background,
        output_format=output_format,
        resolution=resolution,
    )


def _parse_bounds(value, prefix: str, name: str) -> tuple[int, int]:
    if (
        not isinstance(value, list)
        or len(value) != 2
        or not all(isinstance(v, int) for v in value)
        or not (0 <= value[0] <= value[1])
    ):
        raise ValueError(f"{prefix}: {name} must be [min, max] with 0 <= min <= max, got {value!r}")
    return (value[0], value[1])


def _parse_title_style(style: dict, prefix: str) -> TitleStyle:
    if not isinstance(style, dict):
        raise ValueError(f"{prefix}: 'title_style' must be a mapping")
    unknown = set(style) - TITLE_STYLE_FIELDS
    if unknown:
        raise ValueError(
            f"{prefix}: unknown title_style field(s) {sorted(unknown)}. "
            f"Valid: {sorted(TITLE_STYLE_FIELDS)}"
        )
    return TitleStyle(**style)
