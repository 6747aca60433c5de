"""Request pipeline: validate, search, select, lay out, finalize, submit.

Clients are passed in rather than built from the environment, so the
whole flow runs against fakes in tests. Each step either returns its
result or raises a ReelComposeError; nothing reaches the render service
unless every earlier step succeeded.
"""

import logging
import random
from typing import Protocol, Sequence

from .assembly import assemble_tracks
from .errors import InsufficientAssets
from .layout import layout_clips
from .manifest import default_registry
from .search import Asset, SearchPage
from .selection import select_assets
from .templates import SELECT_RANDOM, Template, TemplateRegistry
from .timeline import build_payload, finalize
from .validation import validate_job_id, validate_request

logger = logging.getLogger(__name__)


class SearchClient(Protocol):
    def search_photos(
        self, query: str, per_page: int, orientation: str = "landscape",
    ) -> SearchPage: ...


class RenderClient(Protocol):
    def submit(self, payload: dict) -> str: ...

    def fetch_status(self, job_id: str) -> dict: ...


def compose_payload(
    template: Template,
    candidates: Sequence[Asset],
    title: str,
    soundtrack: str,
    rng: random.Random | None = None,
    query: str = "",
) -> dict:
    """Build the render request from a candidate pool. No network access.

    Raises:
        InsufficientAssets: Pool smaller than template.clip_count.
        LayoutError: Template timings break a layout invariant.
        UnknownSoundtrack: ``soundtrack`` not in the template.
    """
    if template.selection == SELECT_RANDOM and rng is None:
        rng = random.Random()
    assets = select_assets(
        candidates, template.clip_count, template.selection, rng=rng, query=query,
    )
    layout = layout_clips(template, assets, title)
    tracks = assemble_tracks(layout.title, layout.slots)
    timeline = finalize(tracks, soundtrack, template)
    return build_payload(timeline, template)


def preview(
    request: dict,
    *,
    search_client: SearchClient,
    registry: TemplateRegistry | None = None,
    rng: random.Random | None = None,
) -> dict:
    """Validate and compose a request without submitting it."""
    if registry is None:
        registry = default_registry()
    clean, template = validate_request(request, registry)
    page = _fetch_candidates(clean["search"], template, search_client)
    return compose_payload(
        template, page.assets, clean["title"], clean["soundtrack"],
        rng=rng, query=clean["search"],
    )


def submit(
    request: dict,
    *,
    search_client: SearchClient,
    render_client: RenderClient,
    registry: TemplateRegistry | None = None,
    rng: random.Random | None = None,
) -> str:
    """Compose a video for ``request`` and queue it; return the job id.

    Args:
        request: {"search", "title", "soundtrack", "template"?}.
        search_client: Photo search collaborator.
        render_client: Render service collaborator.
        registry: Template catalogue (packaged templates by default).
        rng: Random source for templates that sample their images.

    Raises:
        ValidationError, InsufficientAssets, LayoutError,
        UnknownSoundtrack, TransportError.
    """
    payload = preview(request, search_client=search_client, registry=registry, rng=rng)
    job_id = render_client.submit(payload)
    logger.info(f"Queued render {job_id} for '{request['search']}'")
    return job_id


def status(job_id: str, *, render_client: RenderClient) -> dict:
    """Return the render service's status record for ``job_id``.

    Raises:
        ValidationError: ``job_id`` is not a v4/v5 UUID.
        TransportError: The status call failed.
    """
    return render_client.fetch_status(validate_job_id(job_id))


def _fetch_candidates(query: str, template: Template, search_client: SearchClient) -> SearchPage:
    logger.info(
        f"Searching '{query}' for template '{template.id}' "
        f"({template.page_size} per page)"
    )
    page = search_client.search_photos(
        query, per_page=template.page_size, orientation=template.orientation,
    )
    if page.total_results < template.min_clips:
        raise InsufficientAssets(query, template.min_clips, page.total_results)
    return page
