"""POST /previews endpoint handler."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Request

from linkpreview.api.schemas import PreviewRequest, PreviewResponse
from linkpreview.api.service import create_previews
from linkpreview.auth.dependencies import require_api_key
from linkpreview.config import Settings
from linkpreview.scrape import InputError

router = APIRouter(dependencies=[Depends(require_api_key)])


def _get_settings(request: Request) -> Settings:
    return request.app.state.settings


@router.post("/previews", response_model=PreviewResponse)
async def post_previews(
    body: PreviewRequest,
    settings: Settings = Depends(_get_settings),
) -> PreviewResponse:
    try:
        return await create_previews(settings, body)
    except InputError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
