"""High-level clients."""

from .pair_feed import PairFeed

__all__ = ["PairFeed"]
