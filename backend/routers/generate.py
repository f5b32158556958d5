"""Prompt relay endpoint"""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends

from models.generate import ErrorResponse, GenerateRequest, GenerateResponse
from services.errors import PromptRequiredError, UpstreamError
from services.llm_service import LLMService, get_llm_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/generate",
    response_model=GenerateResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def generate(
    request: GenerateRequest,
    llm_service: LLMService = Depends(get_llm_service),
) -> GenerateResponse:
    """Relay a prompt to the model and return its text unmodified"""
    prompt = (request.prompt or "").strip()
    if not prompt:
        raise PromptRequiredError()

    start_time = time.monotonic()
    try:
        text = await llm_service.generate_response(prompt, request.model)
    except Exception as e:
        logger.exception("[Generate] Upstream call failed")
        raise UpstreamError(str(e)) from e

    logger.info("[Generate] Completed in %.2fs", time.monotonic() - start_time)
    return GenerateResponse(text=text)
