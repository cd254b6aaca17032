"""Request/response Pydantic models."""

from pydantic import BaseModel, Field


class PreviewRequest(BaseModel):
    urls: list[str]


class PreviewRecord(BaseModel):
    model_config = {"extra": "forbid", "populate_by_name": True}

    url: str
    title: str | None = None
    preview_image: str | None = Field(default=None, alias="previewImage")


class PreviewError(BaseModel):
    model_config = {"extra": "forbid"}

    url: str
    error: str


class PreviewResponse(BaseModel):
    results: list[PreviewRecord | PreviewError]
