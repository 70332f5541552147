"""Operational health models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FeedHealth:
    location: str
    reachable: bool
    status_code: int | None
    items_found: int
    checked_at: str
    error: str | None = None
