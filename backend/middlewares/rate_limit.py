"""
Per-endpoint request limiter keyed by client IP.

Each policy is a fixed window: the first request from an IP opens a window of
the configured length, every request inside it counts, and once the count
reaches the policy's limit further requests are refused until the window
expires. Counters live in a `limits` storage backend. The default
"memory://" backend is per-process and sweeps expired windows itself; a
shared backend (e.g. Redis) can be selected with RATE_LIMIT_STORAGE_URI.

The limiter instance is created at startup and kept on `app.state`; routes
pull it in through the `rate_limit(<policy>)` dependency.
"""

import logging
import math
from dataclasses import dataclass

from fastapi import Depends, Request, Response
from limits import RateLimitItem, parse
from limits.storage import Storage, storage_from_string
from limits.strategies import FixedWindowRateLimiter

from exceptions import RateLimitExceededError, rate_limit_headers
from utils.constant import RATE_LIMIT_LABELS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RateLimitResult:
    allowed: bool
    remaining: int
    limit: int
    reset_time: float


class RateLimiter:
    def __init__(self, policies, storage_uri: str = "memory://", storage: Storage = None):
        self.storage = storage if storage is not None else storage_from_string(storage_uri)
        self.strategy = FixedWindowRateLimiter(self.storage)
        self.policies = {}
        for name, limit in policies.items():
            self.policies[name] = limit if isinstance(limit, RateLimitItem) else parse(limit)

    def check(self, policy: str, client_key: str) -> RateLimitResult:
        """Count one request for `client_key` under `policy`."""
        item = self.policies[policy]
        # The policy name keeps equally-sized policies from sharing a counter.
        allowed = self.strategy.hit(item, policy, client_key)
        reset_time, remaining = self.strategy.get_window_stats(item, policy, client_key)
        return RateLimitResult(
            allowed=allowed,
            remaining=remaining if allowed else 0,
            limit=item.amount,
            reset_time=reset_time,
        )

    def exceeded_message(self, policy: str) -> str:
        minutes = max(1, math.ceil(self.policies[policy].get_expiry() / 60))
        label = RATE_LIMIT_LABELS.get(policy, "")
        return f"{label}利用制限に達しました。{minutes}分後に再度お試しください。"

    def reset(self):
        self.storage.reset()


def get_client_ip(request: Request) -> str:
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip()

    real_ip = request.headers.get("x-real-ip")
    if real_ip:
        return real_ip

    if request.client and request.client.host:
        return request.client.host
    return "unknown"


def get_rate_limiter(request: Request) -> RateLimiter:
    return request.app.state.rate_limiter


def rate_limit(policy: str):
    """Dependency factory: refuse the request with 429 once `policy` is exhausted."""

    async def dependency(
        request: Request,
        response: Response,
        limiter: RateLimiter = Depends(get_rate_limiter),
    ) -> RateLimitResult:
        client_ip = get_client_ip(request)
        result = limiter.check(policy, client_ip)
        logger.info(
            "🛡️ Rate limit check [%s] - IP: %s, Allowed: %s, Remaining: %s",
            policy, client_ip, result.allowed, result.remaining,
        )
        if not result.allowed:
            raise RateLimitExceededError(result, limiter.exceeded_message(policy))

        response.headers.update(rate_limit_headers(result))
        return result

    return dependency
