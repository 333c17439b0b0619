"""FastAPI application entrypoint for LifePath."""

from __future__ import annotations

import logging

from lifepath.libs.logging_utils import configure_logging

configure_logging()

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette_exporter import PrometheusMiddleware, handle_metrics

from lifepath.apps.api.middleware import RequestLoggingMiddleware
from lifepath.apps.api.routes.analyze import router as analyze_router
from lifepath.apps.api.routes.questionnaire import router as questionnaire_router
from lifepath.libs.schemas import get_settings

LOGGER = logging.getLogger(__name__)
SETTINGS = get_settings()

app = FastAPI(title=f"{SETTINGS.app_name} API", version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=SETTINGS.cors_origins,
    allow_credentials=False,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)
app.add_middleware(RequestLoggingMiddleware)
if SETTINGS.enable_metrics:
    app.add_middleware(PrometheusMiddleware, app_name="lifepath")
    app.add_route("/metrics", handle_metrics)


@app.get("/health", tags=["system"])
def health():
    return {"status": "ok"}


app.include_router(analyze_router)
app.include_router(questionnaire_router)

LOGGER.info(
    "LifePath API ready env=%s age_bounds=%s metrics=%s",
    SETTINGS.environment,
    SETTINGS.age_bounds,
    SETTINGS.enable_metrics,
)


__all__ = ["app"]


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("lifepath.apps.api.main:app", host="0.0.0.0", port=8000, reload=True)
