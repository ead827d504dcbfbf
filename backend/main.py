import logging

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from postgrest.exceptions import APIError
from starlette.exceptions import HTTPException as StarletteHTTPException
from supabase import AuthApiError

from config import CORS_ORIGINS, LOG_LEVEL, RATE_LIMIT_POLICIES, RATE_LIMIT_STORAGE_URI

# Routers
from routers.chat_router import router as chat_router
from routers.interview_router import router as interview_router
from routers.profile_router import router as profile_router
from routers.project_router import router as project_router
from routers.session_router import router as session_router

# Middlewares
from middlewares.rate_limit import RateLimiter

# Exceptions
from exceptions import (
    AudioValidationError,
    LLMServiceError,
    RateLimitExceededError,
    audio_validation_exception_handler,
    global_exception_handler,
    http_exception_handler,
    llm_exception_handler,
    postgrest_exception_handler,
    rate_limit_exception_handler,
    supabase_auth_exception_handler,
    validation_exception_handler,
)

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)

app = FastAPI(title="AI Business Coach")

# Created eagerly: the Vercel handler runs with lifespan off.
app.state.rate_limiter = RateLimiter(RATE_LIMIT_POLICIES, RATE_LIMIT_STORAGE_URI)

# ✅ CORS Support
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["*"],
    expose_headers=["X-RateLimit-Limit", "X-RateLimit-Remaining", "X-RateLimit-Reset"],
)


# Manual OPTIONS handler for preflight requests the middleware does not answer
@app.options("/{full_path:path}")
async def options_handler(request: Request, full_path: str):
    response = Response()
    response.headers["Access-Control-Allow-Origin"] = request.headers.get("origin", "*")
    response.headers["Access-Control-Allow-Methods"] = "GET, POST, PUT, PATCH, DELETE, OPTIONS"
    response.headers["Access-Control-Allow-Headers"] = "*"
    response.headers["Access-Control-Max-Age"] = "86400"
    return response


# ✅ Root route for health check
@app.get("/")
async def root():
    return {
        "status": "ok",
        "message": "AI Business Coach API is running",
        "version": "1.0.0"
    }


# ✅ Routers
app.include_router(chat_router, prefix="/api")
app.include_router(interview_router, prefix="/api")
app.include_router(project_router, prefix="/api")
app.include_router(session_router, prefix="/api")
app.include_router(profile_router, prefix="/api")

# ✅ Global Exception Handlers
app.add_exception_handler(RateLimitExceededError, rate_limit_exception_handler)
app.add_exception_handler(LLMServiceError, llm_exception_handler)
app.add_exception_handler(AudioValidationError, audio_validation_exception_handler)
app.add_exception_handler(AuthApiError, supabase_auth_exception_handler)
app.add_exception_handler(APIError, postgrest_exception_handler)
app.add_exception_handler(Exception, global_exception_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
