"""
Game data fetcher.
Downloads the character table and the uniequip table from the game data repository.
"""

from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, Tuple

import requests

from .constants import (
    CHARACTER_TABLE_JSON_URL,
    REQUEST_HEADERS,
    REQUEST_TIMEOUT,
    UNIEQUIP_TABLE_JSON_URL,
)


class FetchError(RuntimeError):
    """A remote document could not be downloaded or parsed"""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to fetch {url}: {reason}")


class GameDataFetcher:
    """Fetches JSON tables from the game data repository"""

    def __init__(self, character_table_url: str = CHARACTER_TABLE_JSON_URL,
                 uniequip_table_url: str = UNIEQUIP_TABLE_JSON_URL,
                 timeout: float = REQUEST_TIMEOUT):
        self.character_table_url = character_table_url
        self.uniequip_table_url = uniequip_table_url
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update(REQUEST_HEADERS)

    def fetch_json(self, url: str) -> Any:
        """GET a URL and parse the body as JSON"""
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            raise FetchError(url, str(e)) from e

        try:
            return response.json()
        except ValueError as e:
            raise FetchError(url, f"invalid JSON ({e})") from e

    def fetch_tables(self) -> Tuple[Dict, Dict]:
        """
        Fetch the character table and the uniequip table in parallel.
        Both must succeed; the first failure is raised.
        """
        urls = [self.character_table_url, self.uniequip_table_url]
        with ThreadPoolExecutor(max_workers=len(urls)) as executor:
            futures = [executor.submit(self.fetch_json, url) for url in urls]
            char_table, uniequip_table = [future.result() for future in futures]

        return char_table, uniequip_table

    def close(self):
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
