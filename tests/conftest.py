"""Shared test fixtures for reelcompose tests."""

import pytest

from reelcompose.search import Asset, SearchPage
from reelcompose.templates import Template, TitleStyle


SOUNDTRACKS = {
    "disco": "https://assets.example.com/music/disco.mp3",
    "lit": "https://assets.example.com/music/lit.mp3",
}

EFFECTS = ["zoomIn", "slideUp", "slideLeft", "zoomOut", "slideDown", "slideRight"]

LUMAS = [f"https://assets.example.com/luma/{n}.mp4" for n in range(1, 7)]


def make_assets(n):
    """Return n distinct image assets."""
    return [Asset(source_url=f"https://images.example.com/{i}.jpg") for i in range(n)]


def make_template(**overrides):
    """Template A: 3s title, six 4s clips, 2s luma wipes, overlay."""
    fields = dict(
        id="a",
        clip_count=6,
        min_clips=4,
        title_length=3,
        clip_length=4,
        luma_length=2,
        effect_cycle=EFFECTS,
        luma_cycle=LUMAS,
        soundtracks=SOUNDTRACKS,
        layout_policy="overlay",
    )
    fields.update(overrides)
    return Template(**fields)


class FakeSearchClient:
    """Records calls and returns a fixed page of assets."""

    def __init__(self, assets, total_results=None):
        self.assets = assets
        self.total_results = len(assets) if total_results is None else total_results
        self.calls = []

    def search_photos(self, query, per_page, orientation="landscape"):
        self.calls.append({"query": query, "per_page": per_page, "orientation": orientation})
        return SearchPage(total_results=self.total_results, assets=self.assets[:per_page])


class FakeRenderClient:
    def __init__(self, job_id="5b4c1c2e-8f0b-4d9e-9d6a-6f1f3c2b7a10", status=None):
        self.job_id = job_id
        self.status_record = status or {"id": job_id, "status": "queued"}
        self.submitted = []
        self.status_calls = []

    def submit(self, payload):
        self.submitted.append(payload)
        return self.job_id

    def fetch_status(self, job_id):
        self.status_calls.append(job_id)
        return self.status_record


@pytest.fixture
def template_a():
    return make_template()


@pytest.fixture
def template_b():
    """Template B: 6s title, eight 7s clips, 2s wipes, trim, entry fade."""
    return make_template(
        id="b",
        clip_count=8,
        min_clips=8,
        title_length=6,
        clip_length=7,
        layout_policy="trim",
        entry_fade=True,
        effect_cycle=["zoomIn", "zoomOut"],
        luma_cycle=LUMAS[:2],
        title_style=TitleStyle(
            style="minimal", size="medium", effect=None,
            transition_in="slideRight", transition_out="slideLeft", uppercase=True,
        ),
    )
