"""Business logic service for shortlink."""

import enum
import logging
from dataclasses import dataclass
from typing import Optional, Dict

from .config import Config
from .errors import CodeAllocationError, InvalidURLError
from .shortcode import ShortCodeGenerator
from .store.base import LinkStore
from .store.cache import RedisCache
from .store.memory import MemoryLinkStore
from .store.models import InsertStatus, ShortLink
from .store.postgres import PostgresLinkStore
from .common.validators import is_valid_url


class AllocationStatus(enum.Enum):
    """Outcome of the bounded code allocation loop."""

    CREATED = "created"
    EXISTING = "existing"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True)
class AllocationResult:
    status: AllocationStatus
    short_code: Optional[str] = None
    attempts: int = 0


@dataclass(frozen=True)
class ShortenResult:
    """A stored link plus whether this call created it."""

    link: ShortLink
    created: bool


class ShortLinkService:
    """Service layer for URL shortening business logic."""

    def __init__(
        self,
        store: LinkStore,
        cache: Optional[RedisCache] = None,
        short_code_generator: Optional[ShortCodeGenerator] = None,
        logger: Optional[logging.Logger] = None,
        max_allocation_attempts: int = 20,
    ):
        """Initialize shortlink service.

        Args:
            store: Mapping store instance
            cache: Optional cache for redirect lookups
            short_code_generator: Optional short code generator
            logger: Optional logger
            max_allocation_attempts: Candidate codes tried before giving up
        """
        if max_allocation_attempts < 1:
            raise ValueError("max_allocation_attempts must be at least 1")
        self.store = store
        self.cache = cache
        self.generator = short_code_generator or ShortCodeGenerator()
        self.logger = logger or logging.getLogger(__name__)
        self.max_allocation_attempts = max_allocation_attempts

    async def shorten(self, original_url: str) -> ShortenResult:
        """Return the short link for a URL, creating it on first use.

        Args:
            original_url: The original long URL

        Returns:
            ShortenResult; ``created`` is False when the URL was already stored

        Raises:
            InvalidURLError: If the URL fails validation
            CodeAllocationError: If no free code was found within the bound
            StorageError: On backing store failure
        """
        is_valid, error = is_valid_url(original_url)
        if not is_valid:
            self.logger.info(f"Rejected URL {original_url!r}: {error}")
            raise InvalidURLError(details={"reason": error})

        existing = await self.store.get_code_for_url(original_url)
        if existing is not None:
            self.logger.debug(f"Existing short URL: {existing} -> {original_url}")
            return ShortenResult(ShortLink(original_url, existing), created=False)

        result = await self.allocate(original_url)

        if result.status is AllocationStatus.EXHAUSTED:
            self.logger.error(
                f"Exceeded {self.max_allocation_attempts} attempts to allocate "
                f"a short code for '{original_url}'"
            )
            raise CodeAllocationError()

        created = result.status is AllocationStatus.CREATED
        if created:
            self.logger.info(f"Created short URL: {result.short_code} -> {original_url}")
        return ShortenResult(ShortLink(original_url, result.short_code), created=created)

    async def allocate(self, original_url: str) -> AllocationResult:
        """Generate candidate codes and insert until one sticks.

        The ``code_exists`` pre-check only avoids pointless inserts; the
        store's insert-if-absent is what guarantees uniqueness.
        """
        for attempt in range(1, self.max_allocation_attempts + 1):
            candidate = self.generator.generate_random()

            if await self.store.code_exists(candidate):
                self.logger.info(
                    f"Generated code '{candidate}' already exists, trying again (attempt {attempt})"
                )
                continue

            inserted = await self.store.insert_if_absent(original_url, candidate)

            if inserted.status is InsertStatus.INSERTED:
                return AllocationResult(AllocationStatus.CREATED, inserted.short_code, attempt)
            if inserted.status is InsertStatus.URL_EXISTS:
                return AllocationResult(AllocationStatus.EXISTING, inserted.short_code, attempt)

            self.logger.info(
                f"Short code '{candidate}' claimed concurrently, retrying (attempt {attempt})"
            )

        return AllocationResult(AllocationStatus.EXHAUSTED, attempts=self.max_allocation_attempts)

    async def resolve(self, short_code: str) -> Optional[str]:
        """Get the original URL for a short code.

        Args:
            short_code: The short code to lookup

        Returns:
            Original URL or None if not found
        """
        if not self.generator.is_valid_format(short_code):
            return None

        if self.cache:
            cached_url = await self.cache.get(short_code)
            if cached_url:
                self.logger.debug(f"Cache hit for {short_code}")
                return cached_url

        original_url = await self.store.get_url_for_code(short_code)

        if original_url is None:
            self.logger.info(f"Short code not found: {short_code}")
            return None

        if self.cache:
            await self.cache.set(short_code, original_url)
        return original_url

    async def health_check(self) -> Dict[str, bool]:
        """Perform health check.

        Returns:
            Dictionary with health status
        """
        db_healthy = await self.store.health_check()

        cache_healthy = True
        if self.cache and self.cache.enabled:
            cache_healthy = await self.cache.ping()

        return {
            "database": db_healthy,
            "cache": cache_healthy,
            "overall": db_healthy and cache_healthy,
        }

    async def close(self) -> None:
        """Close service connections."""
        await self.store.close()
        if self.cache:
            await self.cache.close()


def build_store(config: Config, logger: Optional[logging.Logger] = None) -> LinkStore:
    """Create the mapping store selected by ``config.storage_backend``."""
    if config.storage_backend == "postgres":
        return PostgresLinkStore(
            dsn=config.database_dsn,
            pool_max_size=config.db_pool_max_size,
            timeout_seconds=config.db_timeout_seconds,
            create_tables=config.database_create_tables,
            logger=logger,
        )
    return MemoryLinkStore(logger=logger)


async def build_service(config: Config, logger: Optional[logging.Logger] = None) -> ShortLinkService:
    """Create and connect a service from configuration.

    Raises:
        StorageError: If the store cannot be reached
    """
    store = build_store(config, logger)
    await store.connect()

    cache = None
    if config.redis_url:
        cache = RedisCache(
            redis_url=config.redis_url,
            ttl_seconds=config.cache_ttl_seconds,
            logger=logger,
        )
        await cache.connect()

    return ShortLinkService(
        store=store,
        cache=cache,
        short_code_generator=ShortCodeGenerator(default_length=config.short_code_length),
        logger=logger,
        max_allocation_attempts=config.max_allocation_attempts,
    )
