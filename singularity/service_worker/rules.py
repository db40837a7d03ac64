import re
from dataclasses import dataclass
from enum import Enum

from .js import JsRegex

CACHE_PREFIX = "hyperworker-"

ONE_YEAR_SECONDS = 60 * 60 * 24 * 365


class CachingStrategy(str, Enum):
    """Workbox runtime caching handlers used by the app."""

    STALE_WHILE_REVALIDATE = "StaleWhileRevalidate"
    CACHE_FIRST = "CacheFirst"


@dataclass(frozen=True)
class ExpirationPolicy:
    """Cache expiration limits; unset limits are left to Workbox."""

    max_entries: int | None = None
    max_age_seconds: int | None = None

    def to_workbox(self) -> dict:
        options = {}
        if self.max_entries is not None:
            options["maxEntries"] = self.max_entries
        if self.max_age_seconds is not None:
            options["maxAgeSeconds"] = self.max_age_seconds
        return options


@dataclass(frozen=True)
class RuntimeCachingRule:
    """Immutable runtime caching rule handed to the service-worker generator."""

    url_pattern: str
    handler: CachingStrategy
    cache_name: str
    expiration: ExpirationPolicy | None = None
    cacheable_statuses: tuple[int, ...] | None = None

    def __post_init__(self) -> None:
        # Patterns are emitted as JS regex literals; keep them Python-compilable too
        re.compile(self.url_pattern)

    def to_workbox(self) -> dict:
        options: dict = {"cacheName": self.cache_name}
        if self.cacheable_statuses is not None:
            options["cacheableResponse"] = {"statuses": list(self.cacheable_statuses)}
        if self.expiration is not None:
            options["expiration"] = self.expiration.to_workbox()
        return {
            "urlPattern": JsRegex(self.url_pattern),
            "handler": self.handler.value,
            "options": options,
        }


RUNTIME_CACHING: tuple[RuntimeCachingRule, ...] = (
    RuntimeCachingRule(
        url_pattern=r"^https://fonts\.googleapis\.com",
        handler=CachingStrategy.STALE_WHILE_REVALIDATE,
        cache_name=CACHE_PREFIX + "google-fonts-stylesheets",
    ),
    RuntimeCachingRule(
        url_pattern=r"^https://fonts\.gstatic\.com",
        handler=CachingStrategy.CACHE_FIRST,
        cache_name=CACHE_PREFIX + "google-fonts-webfonts",
        cacheable_statuses=(0, 200),
        expiration=ExpirationPolicy(max_entries=30, max_age_seconds=ONE_YEAR_SECONDS),
    ),
    RuntimeCachingRule(
        url_pattern=r"\.(?:png|jpg|jpeg|svg)$",
        handler=CachingStrategy.STALE_WHILE_REVALIDATE,
        cache_name=CACHE_PREFIX + "images",
        expiration=ExpirationPolicy(max_entries=10),
    ),
)
