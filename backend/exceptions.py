import logging
import math

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from postgrest.exceptions import APIError
from starlette.exceptions import HTTPException as StarletteHTTPException
from supabase import AuthApiError

from utils.constant import ERROR_MESSAGES

logger = logging.getLogger(__name__)


class LLMServiceError(Exception):
    """Provider failure already bucketed into the status we answer with."""

    def __init__(self, status_code: int, message: str, provider_status: int = None):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.provider_status = provider_status


class AudioValidationError(Exception):
    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


class RateLimitExceededError(Exception):
    def __init__(self, result, message: str):
        super().__init__(message)
        self.result = result
        self.message = message


def rate_limit_headers(result) -> dict:
    headers = {
        "X-RateLimit-Limit": str(result.limit),
        "X-RateLimit-Remaining": str(result.remaining),
    }
    if not result.allowed:
        headers["X-RateLimit-Reset"] = str(math.ceil(result.reset_time))
    return headers


def _error(status_code: int, message: str, **extra) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": message, **extra},
    )


async def rate_limit_exception_handler(request: Request, exc: RateLimitExceededError):
    logger.warning("⚠️ Rate limit exceeded on %s", request.url.path)
    return JSONResponse(
        status_code=429,
        content={"success": False, "error": exc.message, "rateLimitExceeded": True},
        headers=rate_limit_headers(exc.result),
    )


async def llm_exception_handler(request: Request, exc: LLMServiceError):
    return _error(exc.status_code, exc.message)


async def audio_validation_exception_handler(request: Request, exc: AudioValidationError):
    return _error(exc.status_code, exc.message)


async def supabase_auth_exception_handler(request: Request, exc: AuthApiError):
    logger.warning("🔒 Supabase auth rejected request: %s", exc.message)
    return _error(401, ERROR_MESSAGES["unauthorized"])


async def postgrest_exception_handler(request: Request, exc: APIError):
    logger.error("💥 Database error on %s: %s", request.url.path, exc.message)
    return _error(500, exc.message or ERROR_MESSAGES["internal"])


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return _error(exc.status_code, exc.detail)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return _error(
        400,
        ERROR_MESSAGES["invalid_request"],
        details=jsonable_encoder(exc.errors()),
    )


async def global_exception_handler(request: Request, exc: Exception):
    logger.exception("💥 Unhandled error on %s", request.url.path)
    return _error(500, ERROR_MESSAGES["internal"])
