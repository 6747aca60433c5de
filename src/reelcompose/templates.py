"""Template registry — named style templates for timeline composition.

A Template fixes every timing constant, cycle and flag the layout engine
needs for one video style. Templates are immutable once loaded; the
registry is built once and only read afterwards, so it can be shared
freely between requests.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from .errors import UnknownTemplate


LAYOUT_OVERLAY = "overlay"
LAYOUT_TRIM = "trim"
VALID_LAYOUT_POLICIES = {LAYOUT_OVERLAY, LAYOUT_TRIM}

SELECT_SEQUENTIAL = "sequential"
SELECT_RANDOM = "random"
VALID_SELECTION_MODES = {SELECT_SEQUENTIAL, SELECT_RANDOM}


@dataclass(frozen=True)
class TitleStyle:
    style: str = "chunk"
    size: str = "small"
    effect: str | None = "zoomIn"
    transition_in: str | None = "fade"
    transition_out: str | None = "fade"
    uppercase: bool = False


@dataclass(frozen=True)
class Template:
    id: str
    clip_count: int
    title_length: float
    clip_length: float
    luma_length: float
    effect_cycle: tuple[str, ...]
    luma_cycle: tuple[str, ...]
    soundtracks: Mapping[str, str]
    layout_policy: str = LAYOUT_OVERLAY
    entry_fade: bool = False
    title_style: TitleStyle = field(default_factory=TitleStyle)
    min_clips: int | None = None
    selection: str = SELECT_SEQUENTIAL
    max_results: int | None = None
    search_length: tuple[int, int] = (2, 30)
    title_length_bounds: tuple[int, int] = (2, 30)
    orientation: str = "landscape"
    background: str = "#000000"
    output_format: str = "mp4"
    resolution: str = "sd"

    def __post_init__(self):
        # Freeze the containers so a shared template cannot be edited.
        object.__setattr__(self, "effect_cycle", tuple(self.effect_cycle))
        object.__setattr__(self, "luma_cycle", tuple(self.luma_cycle))
        object.__setattr__(
            self, "soundtracks", MappingProxyType(dict(self.soundtracks)),
        )
        if self.min_clips is None:
            object.__setattr__(self, "min_clips", self.clip_count)
        if self.max_results is None:
            object.__setattr__(self, "max_results", self.clip_count)

    @property
    def duration(self) -> float:
        """Running time of a video laid out with this template."""
        last_start = self.title_length + (self.clip_count - 1) * (
            self.clip_length - self.luma_length
        )
        last_length = self.clip_length
        if self.layout_policy == LAYOUT_TRIM:
            last_length -= self.luma_length
        return last_start + last_length

    @property
    def page_size(self) -> int:
        """Number of search results to request for one video."""
        if self.selection == SELECT_RANDOM:
            return self.max_results
        return self.clip_count


class TemplateRegistry:
    """Read-only catalogue of templates keyed by id."""

    def __init__(self, templates: list[Template], default_id: str | None = None):
        if not templates:
            raise ValueError("Template registry needs at least one template")
        self._templates = {}
        for template in templates:
            if template.id in self._templates:
                raise ValueError(f"Duplicate template id: '{template.id}'")
            self._templates[template.id] = template

        if default_id is None:
            default_id = templates[0].id
        if default_id not in self._templates:
            raise ValueError(
                f"Default template '{default_id}' is not defined. "
                f"Valid: {sorted(self._templates)}"
            )
        self.default_id = default_id

    def lookup(self, template_id: str | None = None) -> Template:
        """Return the template for ``template_id`` (None means the default)."""
        if template_id is None:
            template_id = self.default_id
        try:
            return self._templates[template_id]
        except KeyError:
            raise UnknownTemplate(template_id, list(self._templates)) from None

    def ids(self) -> list[str]:
        return list(self._templates)

    def __iter__(self):
        return iter(self._templates.values())

    def __len__(self):
        return len(self._templates)

    def __contains__(self, template_id):
        return template_id in self._templates
