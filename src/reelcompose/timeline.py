"""Timeline finalizer -- attach soundtrack, background and output spec."""

from dataclasses import dataclass

from .assembly import Track
from .errors import UnknownSoundtrack
from .templates import Template


SOUNDTRACK_EFFECT = "fadeOut"


@dataclass
class Timeline:
    tracks: list[Track]
    soundtrack: dict
    background: str

    def to_dict(self) -> dict:
        return {
            "soundtrack": dict(self.soundtrack),
            "background": self.background,
            "tracks": [t.to_dict() for t in self.tracks],
        }


def finalize(tracks: list[Track], soundtrack_key: str, template: Template) -> Timeline:
    """Resolve the soundtrack and wrap the tracks into a Timeline.

    Raises:
        UnknownSoundtrack: ``soundtrack_key`` is not in the template's map.
            Request validation normally rejects this first.
    """
    try:
        src = template.soundtracks[soundtrack_key]
    except KeyError:
        raise UnknownSoundtrack(
            soundtrack_key, template.id, list(template.soundtracks),
        ) from None

    return Timeline(
        tracks=tracks,
        soundtrack={"src": src, "effect": SOUNDTRACK_EFFECT},
        background=template.background,
    )


def build_payload(timeline: Timeline, template: Template) -> dict:
    """Return the JSON-ready render request for ``timeline``."""
    return {
        "timeline": timeline.to_dict(),
        "output": {
            "format": template.output_format,
            "resolution": template.resolution,
        },
    }
