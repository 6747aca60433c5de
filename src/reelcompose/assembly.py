"""Track assembly -- group scheduled clips into compositing layers.

Track order is stacking order: track 0 holds the title and is drawn on
top, then one track per selected image in selection order. Each image
track carries the image clip followed by its luma wipe, if it has one.
Tracks are never merged or reordered.
"""

from dataclasses import dataclass, field

from .layout import Clip, Slot


@dataclass
class Track:
    clips: list[Clip] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"clips": [c.to_dict() for c in self.clips]}


def assemble_tracks(title: Clip, slots: list[Slot]) -> list[Track]:
    """Build the ordered track list for a layout.

    Raises:
        ValueError: If there are no image slots.
    """
    if not slots:
        raise ValueError("No image clips to assemble")

    tracks = [Track(clips=[title])]
    for slot in slots:
        clips = [slot.image]
        if slot.luma is not None:
            clips.append(slot.luma)
        tracks.append(Track(clips=clips))
    return tracks
