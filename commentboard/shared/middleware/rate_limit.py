# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import threading
import time
from collections import defaultdict, deque
from collections.abc import Callable
from dataclasses import dataclass
from functools import wraps

from flask import Response, request

from commentboard.shared.config import SecurityConfig
from commentboard.shared.logging import logger

from .request_logger import get_client_ip


@dataclass
class Bucket:
    timestamps: deque[float]


class InMemoryRateLimiter:
    def __init__(self, limit: int, window_seconds: float) -> None:
        self._limit = max(1, int(limit))
        self._window = max(0.1, float(window_seconds))
        self._lock = threading.Lock()
        self._buckets: dict[str, Bucket] = defaultdict(lambda: Bucket(deque(maxlen=self._limit)))

    def allow(self, key: str) -> bool:
        now = time.monotonic()
        with self._lock:
            bucket = self._buckets[key]
            while bucket.timestamps and (now - bucket.timestamps[0]) > self._window:
                bucket.timestamps.popleft()
            if len(bucket.timestamps) >= self._limit:
                return False
            bucket.timestamps.append(now)
            return True


def rate_limit(config: SecurityConfig, *, methods: tuple[str, ...] = ("POST",)):
    """Limit ``methods`` on the wrapped view per client IP; other methods pass through."""
    limiter = InMemoryRateLimiter(config.login_rate_limit, config.rate_limit_window)

    def decorator(f: Callable):
        if not config.enable_rate_limit:
            return f

        @wraps(f)
        def wrapper(*args, **kwargs):
            if request.method in methods:
                key = f"{request.path}:{get_client_ip()}"
                if not limiter.allow(key):
                    logger.warning(f"rate_limit: rejected {request.method} {request.path}")
                    return Response("Too many requests", status=429, mimetype="text/plain")
            return f(*args, **kwargs)

        return wrapper

    return decorator


__all__ = ["InMemoryRateLimiter", "rate_limit"]
