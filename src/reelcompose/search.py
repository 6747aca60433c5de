"""Photo search client (Pexels).

Fetches one page of candidate images for a query. The pipeline receives
a client instance rather than building one, so tests can pass a fake.
"""

import logging
from dataclasses import dataclass

import requests

from .errors import TransportError

logger = logging.getLogger(__name__)


PEXELS_API_URL = "https://api.pexels.com/v1/"


@dataclass(frozen=True)
class Asset:
    """A candidate media file returned by the search provider."""

    source_url: str
    photographer: str | None = None
    page_url: str | None = None


@dataclass(frozen=True)
class SearchPage:
    total_results: int
    assets: list[Asset]


class PexelsClient:
    def __init__(
        self,
        api_key: str,
        base_url: str = PEXELS_API_URL,
        session: requests.Session | None = None,
        timeout: float = 30,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/") + "/"
        self.session = session or requests.Session()
        self.timeout = timeout

    def search_photos(
        self, query: str, per_page: int, orientation: str = "landscape",
    ) -> SearchPage:
        """Return the first page of photos for ``query``.

        Raises:
            TransportError: Network failure, non-2xx status, or a body
                that is not a Pexels search result.
        """
        try:
            response = self.session.get(
                self.base_url + "search",
                headers={"Authorization": self.api_key},
                params={
                    "query": query,
                    "per_page": per_page,
                    "orientation": orientation,
                },
                timeout=self.timeout,
            )
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as e:
            logger.error(f"Photo search for '{query}' failed: {e}")
            raise TransportError(f"Photo search failed: {e}") from e
        except ValueError as e:
            logger.error(f"Photo search for '{query}' returned invalid JSON: {e}")
            raise TransportError("Photo search returned invalid JSON") from e

        return _parse_search_page(data, query)


def _parse_search_page(data, query: str) -> SearchPage:
    if not isinstance(data, dict) or not isinstance(data.get("photos"), list):
        logger.error(f"Photo search for '{query}' returned no 'photos' list")
        raise TransportError("Photo search response has no 'photos' list")

    assets = []
    for photo in data["photos"]:
        src = (photo.get("src") or {}).get("original")
        if not src:
            # A result without an original file cannot be placed on a track.
            continue
        assets.append(Asset(
            source_url=src,
            photographer=photo.get("photographer"),
            page_url=photo.get("url"),
        ))

    total = data.get("total_results", len(assets))
    if not isinstance(total, int):
        logger.error(f"Photo search for '{query}' returned bad total_results: {total!r}")
        raise TransportError(f"Photo search returned bad total_results: {total!r}")
    return SearchPage(total_results=total, assets=assets)
