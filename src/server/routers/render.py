"""Render endpoint for the API."""

import logging

from fastapi import APIRouter

from mdblocks import MarkdownParser
from server.models import RenderRequest, RenderResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/api/render", response_model=RenderResponse)
async def api_render(render_request: RenderRequest) -> RenderResponse:
    """Render Markdown to HTML and plain text.

    **This endpoint parses the submitted Markdown into block fragments**
    (headings, tables and paragraphs) and returns both renderings.

    **Parameters**

    - **render_request** (`RenderRequest`): Pydantic model containing the Markdown source

    **Returns**

    - **RenderResponse**: Rendered HTML, plain text, document title and fragment count

    """
    document = MarkdownParser().parse(render_request.markdown)
    logger.info(
        "Rendered markdown document",
        extra={"input_chars": len(render_request.markdown), "fragments": len(document.fragments)},
    )
    return RenderResponse(
        html=document.html(),
        plain_text=document.plain_text(),
        title=document.title,
        fragment_count=len(document.fragments),
    )


@router.get("/health")
async def health() -> dict[str, str]:
    """Report that the server is up."""
    return {"status": "ok"}
