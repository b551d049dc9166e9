"""Pydantic models for the render API."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from mdblocks.config import MDBLOCKS_MAX_INPUT_CHARS


class RenderRequest(BaseModel):
    """Request model for the /api/render endpoint.

    Attributes
    ----------
    markdown : str
        The Markdown source to render.

    """

    markdown: str = Field(..., max_length=MDBLOCKS_MAX_INPUT_CHARS, description="Markdown source to render")

    @field_validator("markdown")
    @classmethod
    def validate_markdown(cls, v: str) -> str:
        """Validate that ``markdown`` is not blank."""
        if not v.strip():
            err = "markdown cannot be empty"
            raise ValueError(err)
        return v


class RenderResponse(BaseModel):
    """Success response model for the /api/render endpoint.

    Attributes
    ----------
    html : str
        Rendered HTML.
    plain_text : str
        Plain-text projection of the document.
    title : str | None
        Plain text of the first heading, if any.
    fragment_count : int
        Number of block fragments parsed.

    """

    html: str
    plain_text: str
    title: str | None = None
    fragment_count: int = Field(..., ge=0)
