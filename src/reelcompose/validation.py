"""Request validation for submit and status calls.

Runs before any network call. Length bounds and the allowed soundtrack
keys come from the selected template.
"""

import re
from uuid import RFC_4122, UUID

from .errors import UnknownTemplate, ValidationError
from .templates import Template, TemplateRegistry


TEXT_RE = re.compile(r"^[a-zA-Z0-9 ]*$")

UUID_RE = re.compile(
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
)

ACCEPTED_UUID_VERSIONS = {4, 5}


def validate_request(data: dict, registry: TemplateRegistry) -> tuple[dict, Template]:
    """Check a submit request and return (clean request, template).

    Required: search, title, soundtrack. Optional: template (defaults to
    the registry's default template).

    Raises:
        ValidationError: Any missing or malformed field.
    """
    if not isinstance(data, dict):
        raise ValidationError("request", "must be a mapping")

    template_id = data.get("template")
    if template_id is not None and not isinstance(template_id, str):
        raise ValidationError("template", "must be a string")
    try:
        template = registry.lookup(template_id)
    except UnknownTemplate as e:
        raise ValidationError("template", e.message) from e

    search = _validate_text(data, "search", template.search_length)
    title = _validate_text(data, "title", template.title_length_bounds)

    soundtrack = data.get("soundtrack")
    if soundtrack is None:
        raise ValidationError("soundtrack", "is required")
    if not isinstance(soundtrack, str):
        raise ValidationError("soundtrack", "must be a string")
    if soundtrack not in template.soundtracks:
        raise ValidationError(
            "soundtrack",
            f"must be one of {sorted(template.soundtracks)}, got {soundtrack!r}",
        )

    clean = {
        "search": search,
        "title": title,
        "soundtrack": soundtrack,
        "template": template.id,
    }
    return clean, template


def _validate_text(data: dict, name: str, bounds: tuple[int, int]) -> str:
    value = data.get(name)
    if value is None:
        raise ValidationError(name, "is required")
    if not isinstance(value, str):
        raise ValidationError(name, "must be a string")
    if not TEXT_RE.fullmatch(value):
        raise ValidationError(name, "may only contain letters, digits and spaces")
    low, high = bounds
    if not (low <= len(value) <= high):
        raise ValidationError(
            name, f"length must be between {low} and {high}, got {len(value)}"
        )
    return value


def validate_job_id(job_id) -> str:
    """Return ``job_id`` if it is a version 4 or 5 UUID string.

    Raises:
        ValidationError: Anything else.
    """
    if not isinstance(job_id, str):
        raise ValidationError("id", "must be a string")
    if not UUID_RE.fullmatch(job_id):
        raise ValidationError("id", f"'{job_id}' is not a valid UUID")
    parsed = UUID(job_id)
    if parsed.variant != RFC_4122 or parsed.version not in ACCEPTED_UUID_VERSIONS:
        raise ValidationError(
            "id",
            f"UUID version must be one of {sorted(ACCEPTED_UUID_VERSIONS)}",
        )
    return job_id
