"""FastAPI application factory for the preterm labor risk calculator."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from preterm_risk.api.routes import assessment, form, health
from preterm_risk.logging_config import configure_logging
from preterm_risk.settings import get_settings


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        version=settings.api_version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    api_prefix = f"/api/{settings.api_version}"
    app.include_router(health.router, prefix=api_prefix, tags=["health"])
    app.include_router(assessment.router, prefix=api_prefix, tags=["assessment"])
    app.include_router(form.router, tags=["form"])

    return app


app = create_app()
