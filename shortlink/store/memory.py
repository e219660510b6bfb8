"""In-process implementation of the shortlink store."""

import asyncio
import logging
from typing import Dict, Optional

from .base import LinkStore
from .models import InsertResult


class MemoryLinkStore(LinkStore):
    """Store backed by two dictionaries living in the current process.

    Reads take no lock: both dictionaries are updated together without an
    intervening await, so a reader on the event loop never sees half a pair.
    All writes go through ``insert_if_absent`` under ``_write_lock``.
    """

    backend_name = "memory"

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)
        self._url_to_code: Dict[str, str] = {}
        self._code_to_url: Dict[str, str] = {}
        self._write_lock = asyncio.Lock()

    async def get_code_for_url(self, original_url: str) -> Optional[str]:
        return self._url_to_code.get(original_url)

    async def get_url_for_code(self, short_code: str) -> Optional[str]:
        return self._code_to_url.get(short_code)

    async def code_exists(self, short_code: str) -> bool:
        return short_code in self._code_to_url

    async def insert_if_absent(self, original_url: str, short_code: str) -> InsertResult:
        async with self._write_lock:
            existing = self._url_to_code.get(original_url)
            if existing is not None:
                return InsertResult.url_exists(existing)

            if short_code in self._code_to_url:
                self.logger.info(f"Short code '{short_code}' already taken")
                return InsertResult.code_taken()

            self._code_to_url[short_code] = original_url
            self._url_to_code[original_url] = short_code

        self.logger.debug(f"Stored {short_code} -> {original_url}")
        return InsertResult.inserted(short_code)

    async def count(self) -> int:
        return len(self._code_to_url)

    async def health_check(self) -> bool:
        return True

    async def close(self) -> None:
        self.logger.debug("Memory store closed")
