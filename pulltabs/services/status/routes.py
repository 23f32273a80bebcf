"""Instance status page."""

from fastapi import APIRouter, Depends, Request, Response

from pulltabs.config import NotifierConfig
from pulltabs.core.logging import get_logger
from pulltabs.core.templates import render_status_page
from pulltabs.dependencies import get_config

logger = get_logger("status.routes")

router = APIRouter()

STATUS_PATH = "/"
STATUS_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]
STATUS_HEADERS = {
    "Content-Type": "text/html; charset=UTF-8",
    "Cache-Control": "max-age=0, no-cache",
}


def status_response(request: Request, config: NotifierConfig) -> Response:
    """Build the status page; HEAD gets headers only."""
    if request.method == "HEAD":
        response = Response(headers=STATUS_HEADERS)
    else:
        html = render_status_page(instance=config.instance_id, label=config.label)
        response = Response(content=html, headers=STATUS_HEADERS)
    logger.info(f"Successfully served status page for {request.method} request")
    return response


@router.api_route(STATUS_PATH, methods=STATUS_METHODS, include_in_schema=False)
async def status_page(
    request: Request,
    config: NotifierConfig = Depends(get_config),
) -> Response:
    """Report which instance is serving and the label it watches."""
    return status_response(request, config)
