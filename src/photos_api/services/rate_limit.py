"""Rate limiting for photo creation."""

from dataclasses import dataclass, field
from typing import Protocol

from limits import RateLimitItem, parse
from limits.storage import MemoryStorage, Storage
from limits.strategies import MovingWindowRateLimiter


class RateLimiter(Protocol):
    """Gate that allows or denies an action attempt."""

    def try_consume(self) -> bool:
        """Consume one unit of allowance, returning False when exhausted."""


@dataclass
class MovingWindowLimiter(RateLimiter):
    """Single-bucket limiter backed by the `limits` moving window strategy."""

    limit: RateLimitItem
    key: str = "photos:create"
    storage: Storage = field(default_factory=MemoryStorage)

    def __post_init__(self) -> None:
        self._strategy = MovingWindowRateLimiter(self.storage)

    @classmethod
    def from_string(
        cls, rate: str, key: str = "photos:create"
    ) -> "MovingWindowLimiter":
        """Build a limiter from a rate string such as ``10/minute``."""
        return cls(limit=parse(rate), key=key)

    def try_consume(self) -> bool:
        """Record a hit if the window still has room."""
        return self._strategy.hit(self.limit, self.key)
