"""
Module: api.config

Purpose:
    Configuration dataclass for the artworks API client. Immutable
    configuration with validation on construction.

Key Classes:
    - ApiConfig: Endpoint, timeout and page size

Dependencies:
    - dataclasses (std)
    - os (std): ARTWORK_BROWSER_API_BASE override

Used By:
    - api.client: ArtworkClient
    - gui.main_window: client construction
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from artwork_browser.core.models.page import PAGE_SIZE

DEFAULT_API_BASE = "https://api.artic.edu/api/v1/artworks"
API_BASE_ENV_VAR = "ARTWORK_BROWSER_API_BASE"


@dataclass(frozen=True)
class ApiConfig:
    """
    Configuration for the artworks API (immutable).

    Attributes:
        base_url: Collection endpoint; pages are requested as ?page=<n>
        timeout: Per-request timeout in seconds
        page_size: Records per page when the payload omits "limit"

    Example:
        >>> config = ApiConfig()
        >>> config.base_url
        'https://api.artic.edu/api/v1/artworks'
    """

    base_url: str = DEFAULT_API_BASE
    timeout: float = 10.0
    page_size: int = PAGE_SIZE

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if not self.base_url or not self.base_url.startswith(("http://", "https://")):
            raise ValueError(f"base_url must be an http(s) URL: {self.base_url!r}")
        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive: {self.timeout}")
        if self.page_size < 1:
            raise ValueError(f"page_size must be positive: {self.page_size}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ApiConfig":
        """
        Build a config, honouring the base URL override in the environment.

        Args:
            environ: Mapping to read from (defaults to os.environ)
        """
        env = os.environ if environ is None else environ
        base_url = env.get(API_BASE_ENV_VAR, "").strip()
        if base_url:
            return cls(base_url=base_url.rstrip("/"))
        return cls()
