"""File extraction and preview endpoints"""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from models.files import ExtractRequest, ExtractResponse, PreviewRequest
from services.file_extractor import build_file_map, resolve_files
from services.preview_builder import build_preview_html

router = APIRouter()


@router.post("/extract", response_model=ExtractResponse)
async def extract_files(request: ExtractRequest) -> ExtractResponse:
    """Split a model response into named files"""
    resolved = resolve_files(request.text)
    return ExtractResponse(files=build_file_map(resolved), details=resolved)


@router.post("/preview", response_class=HTMLResponse)
async def preview_files(request: PreviewRequest) -> HTMLResponse:
    """Inline CSS/JS into the HTML file of a file mapping"""
    return HTMLResponse(build_preview_html(request.files))
