"""Single-page form served at the application root."""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from preterm_risk.settings import get_settings
from preterm_risk.web import render_index

router = APIRouter()


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
def index() -> HTMLResponse:
    settings = get_settings()
    return HTMLResponse(render_index(api_prefix=f"/api/{settings.api_version}"))
