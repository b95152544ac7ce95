from __future__ import annotations


class WorkdayCacheError(ValueError):
    """Raised for a year or date that is present but not usable as a cache key."""
