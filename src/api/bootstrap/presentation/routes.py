"""Server-rendered storefront routes.

The catch-all page route must be registered after every other router.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse, Response

from bootstrap.application.render_service import RenderRequest, RenderService
from bootstrap.dependencies import get_render_service
from bootstrap.domain.request_host import RequestHost
from infrastructure.settings import SessionCookieSettings
from session.dependencies import get_session_cookie_settings_dep
from session.infrastructure.cookies import read_session_cookie

router = APIRouter(tags=["storefront"])


def _request_host(request: Request) -> RequestHost:
    return RequestHost.from_headers(
        host=request.headers.get("host"),
        forwarded_host=request.headers.get("x-forwarded-host"),
        forwarded_proto=request.headers.get("x-forwarded-proto"),
        scheme=request.url.scheme,
    )


@router.get("/robots.txt", response_class=PlainTextResponse)
async def robots(
    request: Request,
    service: Annotated[RenderService, Depends(get_render_service)],
) -> PlainTextResponse:
    """Crawler directives pointing at this host's sitemap."""
    return PlainTextResponse(service.render_robots(_request_host(request)))


@router.get("/sitemap.xml")
async def sitemap(
    request: Request,
    service: Annotated[RenderService, Depends(get_render_service)],
) -> Response:
    """Sitemap of the store behind the requested host."""
    result = await service.render_sitemap(_request_host(request))
    return Response(
        content=result.body,
        status_code=result.status_code,
        headers=result.headers,
        media_type="application/xml",
    )


@router.get("/{full_path:path}", response_class=HTMLResponse)
async def render_page(
    full_path: str,
    request: Request,
    service: Annotated[RenderService, Depends(get_render_service)],
    cookie_settings: Annotated[
        SessionCookieSettings, Depends(get_session_cookie_settings_dep)
    ],
) -> Response:
    """Render a storefront navigation.

    Raises:
        HTTPException: 404 for paths that are never server rendered
    """
    result = await service.render(
        RenderRequest(
            path=request.url.path,
            host=_request_host(request),
            query=dict(request.query_params),
            has_auth_cookie=read_session_cookie(
                request.cookies, settings=cookie_settings
            )
            is not None,
        )
    )
    if result is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")
    if result.is_redirect:
        return RedirectResponse(url=result.location, status_code=result.status_code)
    return HTMLResponse(
        content=result.body,
        status_code=result.status_code,
        headers=result.headers,
    )
