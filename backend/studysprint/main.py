"""Main FastAPI application for the StudySprint backend."""
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from studysprint.api.routes.dashboard import router as dashboard_router
from studysprint.api.routes.days import router as days_router
from studysprint.api.routes.export import router as export_router
from studysprint.api.routes.generated import router as generated_router
from studysprint.api.routes.logs import router as logs_router
from studysprint.api.routes.plans import router as plans_router
from studysprint.api.routes.settings import router as settings_router
from studysprint.api.routes.tasks import router as tasks_router
from studysprint.core.config import settings
from studysprint.core.logging import configure_logging
from studysprint.core.middleware import RequestIDMiddleware
from studysprint.observability.client import init_opik
from studysprint.observability.tracing import trace

configure_logging(log_level=settings.log_level, sql_echo=settings.debug)

app = FastAPI(title=settings.app_name, version="0.1.0")
app.add_middleware(RequestIDMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-Request-Id"],
)
app.include_router(settings_router)
app.include_router(plans_router)
app.include_router(generated_router)
app.include_router(days_router)
app.include_router(tasks_router)
app.include_router(logs_router)
app.include_router(dashboard_router)
app.include_router(export_router)


@app.on_event("startup")
async def startup_observability() -> None:
    """Initialize observability backends after the event loop starts."""
    init_opik()


@app.get("/health", tags=["health"], summary="Readiness probe")
async def health_check(request: Request) -> dict[str, str]:
    """Return a simple status payload so automation can probe the API."""
    with trace("http.health_check", metadata={"route": "/health"}, request_id=request.state.request_id):
        return {"status": "ok"}
