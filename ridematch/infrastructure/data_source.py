"""
Raw access to the persisted CSV files: a local directory or an HTTP base URL.
One attempt per file, no retries.
"""

import logging
from pathlib import Path
from typing import Optional

import requests

logger = logging.getLogger(__name__)


class DataSourceError(Exception):
    """A required data file could not be obtained or is malformed."""


class DataSource:
    def __init__(
        self,
        data_dir: Optional[Path] = None,
        base_url: Optional[str] = None,
        timeout_s: float = 30.0,
    ):
        if data_dir is None and not base_url:
            raise ValueError("DataSource needs a data_dir or a base_url")
        self.data_dir = Path(data_dir) if data_dir is not None else None
        self.base_url = base_url.rstrip("/") if base_url else None
        self.timeout_s = timeout_s

    def describe(self, filename: str) -> str:
        if self.base_url:
            return f"{self.base_url}/{filename}"
        return str(self.data_dir / filename)

    def read_text(self, filename: str) -> str:
        location = self.describe(filename)
        if self.base_url:
            logger.info("Fetching %s", location)
            try:
                resp = requests.get(location, timeout=self.timeout_s)
                resp.raise_for_status()
            except requests.RequestException as e:
                raise DataSourceError(f"Failed to fetch {filename}: {e}") from e
            return resp.text
        logger.info("Reading %s", location)
        try:
            return (self.data_dir / filename).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise DataSourceError(f"Failed to read {filename}: {e}") from e
