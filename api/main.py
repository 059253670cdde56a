"""FastAPI application entrypoint for the study companion API."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from api.routes.assignments import router as assignments_router
from api.routes.reminders import router as reminders_router
from api.services.runtime import notification_center, reminder_scheduler, settings
from core.logging_config import configure_logging
from notifications import LocalNotificationCenter

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.log_level)
    if isinstance(notification_center, LocalNotificationCenter):
        notification_center.start()
    # Seeded assignments were loaded without notifying the scheduler.
    report = await reminder_scheduler.reconcile()
    logger.info("Startup reconciliation finished with status %s", report.status.value)
    try:
        yield
    finally:
        if isinstance(notification_center, LocalNotificationCenter):
            notification_center.shutdown()


app = FastAPI(
    title="Study Companion",
    version="0.1.0",
    description=(
        "APIs for tracking assignments and keeping deadline reminders in step "
        "with the assignment list."
    ),
    lifespan=lifespan,
)

app.include_router(assignments_router)
app.include_router(reminders_router)


@app.get("/health")
def healthcheck() -> dict[str, str]:
    """Simple readiness probe used by deployment tooling."""

    return {"status": "ok"}


def run() -> None:
    import uvicorn

    uvicorn.run("api.main:app", host="127.0.0.1", port=8000)
