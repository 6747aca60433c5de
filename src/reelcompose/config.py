"""Runtime settings read from the environment.

Variables (a .env file in the working directory is loaded by the CLI):
  SHOTSTACK_HOST          render API root, e.g. https://api.shotstack.io/stage/
  SHOTSTACK_API_KEY       render API key
  SHOTSTACK_ASSETS_URL    overrides the ${assets} path variable in templates
  PEXELS_API_KEY          photo search API key
  REELCOMPOSE_TEMPLATES   alternate template manifest path
  REELCOMPOSE_LOG_LEVEL   logging level name (default INFO)
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping


_ENV_NAMES = {
    "shotstack_host": "SHOTSTACK_HOST",
    "shotstack_api_key": "SHOTSTACK_API_KEY",
    "assets_url": "SHOTSTACK_ASSETS_URL",
    "pexels_api_key": "PEXELS_API_KEY",
    "templates_path": "REELCOMPOSE_TEMPLATES",
}


@dataclass(frozen=True)
class Settings:
    shotstack_host: str | None = None
    shotstack_api_key: str | None = None
    assets_url: str | None = None
    pexels_api_key: str | None = None
    templates_path: str | None = None
    log_level: str = "INFO"

    def require(self, *names: str) -> None:
        """Raise ValueError naming the first unset setting in ``names``."""
        for name in names:
            if not getattr(self, name):
                raise ValueError(f"{_ENV_NAMES[name]} environment variable not set.")

    def template_paths(self) -> dict[str, str]:
        """Path variables that override the template manifest's own."""
        return {"assets": self.assets_url} if self.assets_url else {}


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    env = os.environ if environ is None else environ

    def _get(name):
        value = env.get(name, "").strip()
        return value or None

    return Settings(
        shotstack_host=_get("SHOTSTACK_HOST"),
        shotstack_api_key=_get("SHOTSTACK_API_KEY"),
        assets_url=_get("SHOTSTACK_ASSETS_URL"),
        pexels_api_key=_get("PEXELS_API_KEY"),
        templates_path=_get("REELCOMPOSE_TEMPLATES"),
        log_level=(_get("REELCOMPOSE_LOG_LEVEL") or "INFO").upper(),
    )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
