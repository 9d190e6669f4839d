"""POST /api/render-web-page — full-page screenshot with optional gaze heatmap."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from pagesight.dependencies import get_render_service
from pagesight.models.requests import RenderWebPageRequest
from pagesight.models.responses import ErrorResponse, RenderWebPageResponse
from pagesight.services.render_service import RenderService

router = APIRouter()


@router.post(
    "/render-web-page",
    response_model=RenderWebPageResponse,
    responses={500: {"model": ErrorResponse}},
)
async def render_web_page(
    req: RenderWebPageRequest,
    service: RenderService = Depends(get_render_service),
) -> RenderWebPageResponse:
    # Failures propagate to the handlers registered in main.create_app
    result = await service.render(req.to_job())
    return RenderWebPageResponse(screenshot=result.png_base64(), full_page=True)
