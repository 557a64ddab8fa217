"""Render endpoint for the API."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from doxtree.exceptions import MalformedTreeError
from doxtree.filters import filter_forest
from doxtree.html_renderer import DEFAULT_PAGE_TITLE, render_html
from doxtree.js_parser import parse_hierarchy_js
from doxtree.model import TreeModel
from doxtree.output_formatter import format_hierarchy
from doxtree.renderer import render
from doxtree.utils.logging_config import get_logger
from server.models import RenderErrorResponse, RenderRequest, RenderSuccessResponse

logger = get_logger(__name__)

router = APIRouter()

HTTP_422_UNPROCESSABLE = 422

COMMON_RENDER_RESPONSES: dict[int | str, dict[str, object]] = {
    status.HTTP_200_OK: {"model": RenderSuccessResponse, "description": "Rendered hierarchy"},
    status.HTTP_400_BAD_REQUEST: {"model": RenderErrorResponse, "description": "No hierarchy supplied"},
    HTTP_422_UNPROCESSABLE: {"model": RenderErrorResponse, "description": "Malformed hierarchy"},
}


@router.post("/api/render", responses=COMMON_RENDER_RESPONSES)
async def api_render(render_request: RenderRequest) -> JSONResponse:
    """Render a class hierarchy supplied as arrays or as a ``hierarchy.js`` script.

    **Parameters**

    - **render_request** (`RenderRequest`): hierarchy data and rendering options

    **Returns**

    - **JSONResponse**: summary, text tree, HTML and structured tree, or an
      error with status 400 (nothing to render) or 422 (malformed hierarchy)

    """
    if render_request.hierarchy is None and render_request.script is None:
        return _error(status.HTTP_400_BAD_REQUEST, "Provide either 'hierarchy' or 'script'")

    try:
        raw = render_request.hierarchy
        if raw is None:
            raw = parse_hierarchy_js(render_request.script or "", variable=render_request.variable)
        forest = TreeModel.from_raw(raw)
        forest = filter_forest(
            forest,
            mode=render_request.filter_mode.value,
            selected=render_request.labels,
        )
    except MalformedTreeError as exc:
        logger.warning("Rejected malformed hierarchy", extra={"error": str(exc)})
        return _error(HTTP_422_UNPROCESSABLE, str(exc))

    tree = render(forest, expand_depth=render_request.expand_depth)
    document = format_hierarchy(forest, tree, title=render_request.title or DEFAULT_PAGE_TITLE)
    logger.info("Rendered hierarchy", extra={"roots": len(forest), "nodes": tree.node_count})

    response = RenderSuccessResponse(
        summary=document.summary,
        tree=document.tree_text,
        html=render_html(tree),
        page=document.html,
        rendered=tree,
    )
    return JSONResponse(status_code=status.HTTP_200_OK, content=response.model_dump(mode="json"))


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=RenderErrorResponse(error=message).model_dump())
