"""
Single-page UI for uploading a discovery document and downloading responses.
"""
from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter()

INDEX_HTML = Path(__file__).resolve().parent.parent / "static" / "index.html"


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def index() -> HTMLResponse:
    """Serve the upload form."""
    return HTMLResponse(INDEX_HTML.read_text(encoding="utf-8"))
