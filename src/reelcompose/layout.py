"""Clip layout engine -- schedule the title, image and luma clips.

Takes a Template and the selected assets (in screen order) and computes
the start, length, effect and transitions of every clip.

Timing model:
  - The title plays first, on its own, from 0 to title_length.
  - Image clips follow. Each one overlaps its successor by luma_length,
    so image i starts at title_length + i*clip_length - i*luma_length.
  - A luma matte covers the last luma_length seconds of every image that
    has a successor, driving the wipe into the next image.
  - Layout policy "trim" shortens the final image by luma_length;
    "overlay" keeps every image at full clip_length.

Effects and luma mattes are assigned cyclically by image index, so the
schedule is fully determined by the template and the selection order.
"""

from dataclasses import dataclass
from typing import Sequence

from .errors import LayoutError
from .search import Asset
from .templates import LAYOUT_TRIM, Template


FADE = "fade"


@dataclass(frozen=True)
class Clip:
    """One timed appearance of an asset on a track."""

    asset: dict
    start: float
    length: float
    effect: str | None = None
    transition_in: str | None = None
    transition_out: str | None = None

    @property
    def end(self) -> float:
        return self.start + self.length

    def to_dict(self) -> dict:
        """Render-request form; optional keys are left out when unset."""
        out = {"asset": dict(self.asset), "start": self.start, "length": self.length}
        if self.effect:
            out["effect"] = self.effect
        transition = {}
        if self.transition_in:
            transition["in"] = self.transition_in
        if self.transition_out:
            transition["out"] = self.transition_out
        if transition:
            out["transition"] = transition
        return out


@dataclass(frozen=True)
class Slot:
    """An image clip and the luma wipe that carries it into the next one."""

    image: Clip
    luma: Clip | None = None


@dataclass(frozen=True)
class Layout:
    title: Clip
    slots: list[Slot]

    @property
    def duration(self) -> float:
        return max([self.title.end] + [s.image.end for s in self.slots])


def title_asset(text: str, template: Template) -> dict:
    style = template.title_style
    return {
        "type": "title",
        "text": text.upper() if style.uppercase else text,
        "style": style.style,
        "size": style.size,
    }


def image_asset(asset: Asset) -> dict:
    return {"type": "image", "src": asset.source_url}


def luma_asset(src: str) -> dict:
    return {"type": "luma", "src": src}


def layout_clips(template: Template, assets: Sequence[Asset], title: str) -> Layout:
    """Compute the full clip schedule for one video.

    Args:
        template: Style template supplying all timing constants.
        assets: Exactly template.clip_count assets, in screen order.
        title: Title text (already validated).

    Returns:
        Layout with the title clip and one Slot per asset.

    Raises:
        LayoutError: Wrong asset count, or the template produces a
            negative start, a non-positive length, or a luma wipe that
            does not fit inside its image clip.
    """
    count = template.clip_count
    if len(assets) != count:
        raise LayoutError(
            f"Template '{template.id}' lays out exactly {count} clips, "
            f"got {len(assets)} assets"
        )

    style = template.title_style
    title_clip = Clip(
        asset=title_asset(title, template),
        start=0,
        length=template.title_length,
        effect=style.effect,
        transition_in=style.transition_in,
        transition_out=style.transition_out,
    )
    _check_clip(title_clip, template, "title")

    slots = []
    last = count - 1
    for i, asset in enumerate(assets):
        start = template.title_length + i * template.clip_length - i * template.luma_length

        length = template.clip_length
        if template.layout_policy == LAYOUT_TRIM and i == last:
            length = template.clip_length - template.luma_length

        effect = None
        if template.effect_cycle:
            effect = template.effect_cycle[i % len(template.effect_cycle)]

        image = Clip(
            asset=image_asset(asset),
            start=start,
            length=length,
            effect=effect,
            transition_in=FADE if i == 0 and template.entry_fade else None,
            transition_out=FADE if i == last else None,
        )
        _check_clip(image, template, f"image {i}")
        if slots and image.start <= slots[-1].image.start:
            raise LayoutError(
                f"Template '{template.id}': image {i} does not start after image {i - 1}"
            )

        luma = None
        if i < last:
            luma = Clip(
                asset=luma_asset(template.luma_cycle[i % len(template.luma_cycle)]),
                start=image.end - template.luma_length,
                length=template.luma_length,
            )
            _check_clip(luma, template, f"luma {i}")
            if luma.start < image.start or luma.end > image.end:
                raise LayoutError(
                    f"Template '{template.id}': luma {i} "
                    f"[{luma.start}, {luma.end}) falls outside image {i} "
                    f"[{image.start}, {image.end})"
                )

        slots.append(Slot(image=image, luma=luma))

    return Layout(title=title_clip, slots=slots)


def _check_clip(clip: Clip, template: Template, label: str) -> None:
    if clip.start < 0:
        raise LayoutError(
            f"Template '{template.id}': {label} starts at {clip.start}, before 0"
        )
    if clip.length <= 0:
        raise LayoutError(
            f"Template '{template.id}': {label} has non-positive length {clip.length}"
        )
