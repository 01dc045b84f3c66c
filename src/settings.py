"""Runtime settings for ProductSetManager.

Settings come from the process environment (optionally populated from a
`.env` file by `main`). See `.env.example`:

- PROJECT_ID: Google Cloud project that owns the product sets
- REGION_NAME: Product Search region, e.g. us-east1
"""
from dataclasses import dataclass
from typing import Mapping, Optional
import os

from errors import ConfigError
from resource_names import ResourceLocation


ENV_PROJECT_ID_NAME = "PROJECT_ID"
ENV_REGION_NAME = "REGION_NAME"


@dataclass(frozen=True)
class Settings:
    project_id: str
    region: str

    @property
    def location(self) -> ResourceLocation:
        return ResourceLocation(self.project_id, self.region)


def _get_env(environ: Mapping[str, str], name: str) -> str:
    val = environ.get(name)
    if not val:
        raise ConfigError(f"Missing required environment variable: {name}")
    return val


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from the environment.

    Args:
        environ: Optional mapping to read from instead of `os.environ`.

    Raises:
        ConfigError: if PROJECT_ID or REGION_NAME is missing or empty.
    """
    if environ is None:
        environ = os.environ
    return Settings(
        project_id=_get_env(environ, ENV_PROJECT_ID_NAME),
        region=_get_env(environ, ENV_REGION_NAME),
    )


__all__ = ["Settings", "load_settings", "ENV_PROJECT_ID_NAME", "ENV_REGION_NAME"]
