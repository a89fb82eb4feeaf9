"""In-memory sliding-window rate limiting for public endpoints."""

from __future__ import annotations

import time
from collections import defaultdict

from fastapi import HTTPException, Request, status

from app.config import settings


class RateLimiter:
    """Sliding-window limiter keyed by client IP."""

    def __init__(self, max_requests: int = 10, window_seconds: int = 60):
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._requests: dict[str, list[float]] = defaultdict(list)

    def _get_client_ip(self, request: Request) -> str:
        forwarded = request.headers.get("x-forwarded-for")
        if forwarded:
            return forwarded.split(",")[0].strip()
        real_ip = request.headers.get("x-real-ip")
        if real_ip:
            return real_ip.strip()
        return request.client.host if request.client else "unknown"

    def _cleanup(self, key: str, now: float) -> None:
        cutoff = now - self.window_seconds
        self._requests[key] = [t for t in self._requests[key] if t > cutoff]

    def remaining(self, request: Request) -> int:
        key = self._get_client_ip(request)
        self._cleanup(key, time.time())
        return max(self.max_requests - len(self._requests[key]), 0)

    def check(self, request: Request) -> None:
        """Raise 429 if the client has used up its window."""
        now = time.time()
        key = self._get_client_ip(request)
        self._cleanup(key, now)

        if len(self._requests[key]) >= self.max_requests:
            raise HTTPException(
                status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                detail=f"Rate limit exceeded. Max {self.max_requests} requests per {self.window_seconds}s.",
            )

        self._requests[key].append(now)

    def reset(self) -> None:
        self._requests.clear()


simulation_limiter = RateLimiter(
    max_requests=settings.simulation_rate_limit,
    window_seconds=settings.simulation_rate_window_seconds,
)
