"""Render service client (Shotstack edit API).

Two calls: queue a render for a payload, and look up a render's status.
Status responses are passed through as-is; their lifecycle belongs to
the render service.
"""

import logging

import requests

from .errors import TransportError

logger = logging.getLogger(__name__)


class ShotstackClient:
    def __init__(
        self,
        host: str,
        api_key: str,
        session: requests.Session | None = None,
        timeout: float = 30,
    ):
        # Host is the versioned API root, e.g. https://api.shotstack.io/stage/
        self.host = host.rstrip("/") + "/"
        self.api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout

    def submit(self, payload: dict) -> str:
        """POST a render request and return the job id the service assigns.

        Raises:
            TransportError: Network failure, non-2xx status, or no job id
                in the response.
        """
        body = self._request("POST", "render", json=payload)
        job_id = body.get("id")
        if not job_id:
            logger.error(f"Render submission returned no job id: {body!r}")
            raise TransportError("Render service response has no job id")
        return str(job_id)

    def fetch_status(self, job_id: str) -> dict:
        """Return the render service's status record for ``job_id``."""
        return self._request("GET", f"render/{job_id}")

    def _request(self, method: str, path: str, json: dict | None = None) -> dict:
        url = self.host + path
        try:
            response = self.session.request(
                method,
                url,
                headers={"x-api-key": self.api_key},
                json=json,
                timeout=self.timeout,
            )
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as e:
            logger.error(f"{method} {url} failed: {e}")
            raise TransportError(f"Render service call failed: {e}") from e
        except ValueError as e:
            logger.error(f"{method} {url} returned invalid JSON: {e}")
            raise TransportError("Render service returned invalid JSON") from e

        result = data.get("response") if isinstance(data, dict) else None
        if not isinstance(result, dict):
            logger.error(f"{method} {url} returned an unexpected body: {data!r}")
            raise TransportError("Render service response has no 'response' object")
        return result
