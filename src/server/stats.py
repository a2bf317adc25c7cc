"""In-memory usage statistics."""

from __future__ import annotations

from dataclasses import dataclass, field
import threading
from typing import Dict

from fastapi import Request

from server.rate_limit import client_key


@dataclass
class UsageStats:
    visitors: set[str] = field(default_factory=set)
    extractions: int = 0
    crops: int = 0


_LOCK = threading.Lock()
_STATS = UsageStats()


def record_visit(request: Request) -> None:
    key = client_key(request)
    with _LOCK:
        _STATS.visitors.add(key)


def record_extraction() -> None:
    with _LOCK:
        _STATS.extractions += 1


def record_crop() -> None:
    with _LOCK:
        _STATS.crops += 1


def get_stats() -> Dict[str, int]:
    with _LOCK:
        return {
            "visitor_count": len(_STATS.visitors),
            "extraction_count": _STATS.extractions,
            "crop_count": _STATS.crops,
        }
