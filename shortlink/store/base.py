"""Abstract base class for shortlink store implementations."""

from abc import ABC, abstractmethod
from typing import Optional

from .models import InsertResult


class LinkStore(ABC):
    """Abstract base class for URL <-> short code mapping storage."""

    #: Human readable backend name, reported by health output
    backend_name: str = "abstract"

    async def connect(self) -> None:
        """Open any resources the store needs.

        Raises:
            StorageError: If the backing store is unreachable
        """

    @abstractmethod
    async def get_code_for_url(self, original_url: str) -> Optional[str]:
        """Get the short code for an original URL.

        Args:
            original_url: The original long URL

        Returns:
            The short code if the URL is stored, None otherwise
        """
        pass

    @abstractmethod
    async def get_url_for_code(self, short_code: str) -> Optional[str]:
        """Get the original URL for a short code.

        Args:
            short_code: The short code to lookup

        Returns:
            The original URL if found, None otherwise
        """
        pass

    @abstractmethod
    async def code_exists(self, short_code: str) -> bool:
        """Check if a short code is already taken."""
        pass

    @abstractmethod
    async def insert_if_absent(self, original_url: str, short_code: str) -> InsertResult:
        """Store a mapping unless the URL or the code is already present.

        This is the only mutating operation. Implementations must guarantee
        that neither a URL nor a code ever appears in two mappings, even when
        called concurrently.

        Args:
            original_url: The original long URL
            short_code: Candidate short code

        Returns:
            InsertResult with status INSERTED, URL_EXISTS or CODE_TAKEN
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Number of stored mappings."""
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Check if the store is healthy."""
        pass

    @abstractmethod
    async def close(self) -> None:
        """Release store resources."""
        pass
