import logging
import sys
from contextlib import asynccontextmanager

from starlette.middleware.base import BaseHTTPMiddleware
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from app.api.v1 import (
    auth,
    exercises,
    export,
    group_members,
    groups,
    prs,
    scheduled_workouts,
    users,
    wod,
    workout_results,
    workouts,
)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    stream=sys.stdout,
)
logging.getLogger("app").setLevel(logging.DEBUG)
from app.config import settings
from app.storage import MemStorage, Storage
from prometheus_client import make_asgi_app

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings.validate_jwt_config()
    if settings.google_gemini_api_key:
        import google.generativeai as genai
        genai.configure(api_key=settings.google_gemini_api_key)
    logger.info("EssentialCross API started (storage=%s)", type(app.state.storage).__name__)
    yield


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request, call_next):
        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        if getattr(settings, "enable_hsts", False):
            response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"
        return response


def create_app(storage: Storage | None = None) -> FastAPI:
    """Build the API around one store; route handlers reach it through app.state."""
    app = FastAPI(
        title="EssentialCross API",
        description="CrossFit tracker backend: workouts, PRs, exercises, groups, scheduled workouts",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.storage = storage if storage is not None else MemStorage(seed=settings.seed_exercises)

    limiter = Limiter(key_func=get_remote_address, default_limits=[settings.rate_limit_default])
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)
    app.add_middleware(GZipMiddleware, minimum_size=500)

    origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()] if settings.cors_origins else ["*"]
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    for module in (
        auth,
        users,
        workouts,
        exercises,
        prs,
        groups,
        group_members,
        scheduled_workouts,
        workout_results,
        wod,
        export,
    ):
        app.include_router(module.router, prefix="/api/v1")

    app.mount("/metrics", make_asgi_app())

    @app.get("/health")
    @limiter.exempt
    def health(request: Request):
        return {"status": "ok"}

    return app


app = create_app()


def run() -> None:
    """Serve app with uvicorn using HOST, PORT and DEBUG (reload) from settings."""
    import uvicorn

    uvicorn.run("app.main:app", host=settings.host, port=settings.port, reload=settings.debug)


if __name__ == "__main__":
    run()
