"""
Wiki Routes: 페이지 조회/편집/저장.

- GET /              → index.html
- GET /view/{title}  → view.html (없으면 /edit/{title} 로 302)
- GET /edit/{title}  → edit.html (없으면 빈 페이지)
- POST /save/{title} → 저장 후 /view/{title} 로 302
- GET /api/pages     → 저장된 title 목록

title 검증은 valid_title 의존성이 핸들러보다 먼저 수행 (불일치 → 404).
응답은 요청당 정확히 하나: 실패 시 HTTPException, 성공 시 렌더링/리다이렉트.
"""

import logging
from collections.abc import Callable
from typing import Any

from fastapi import APIRouter, Depends, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, RedirectResponse, Response

from src.core.pages import PageStore
from src.domain.constants import (
    EDIT_PREFIX,
    EDIT_TEMPLATE,
    INDEX_TEMPLATE,
    SAVE_PREFIX,
    VIEW_PREFIX,
    VIEW_TEMPLATE,
)
from src.domain.errors import PageNotFoundError, PageStoreError, RenderError, WikiError
from src.domain.schemas import Page
from src.domain.titles import extract_title, is_valid_title
from src.render.html import HtmlRenderer

logger = logging.getLogger(__name__)

# Routers
router = APIRouter()  # HTML pages
api_router = APIRouter()  # API endpoints


# =============================================================================
# Dependencies
# =============================================================================


def get_store(request: Request) -> PageStore:
    """Request에서 PageStore 가져오기."""
    return request.app.state.store


def get_renderer(request: Request) -> HtmlRenderer:
    """Request에서 HtmlRenderer 가져오기."""
    return request.app.state.renderer


def _route_path(request: Request) -> str:
    """
    root_path(마운트/프록시 prefix)를 제외한 앱 내부 경로.

    서버에 따라 scope["path"]에 root_path가 포함되기도 하고 아니기도 함.
    """
    path: str = request.scope["path"]
    root_path: str = request.scope.get("root_path", "")
    if root_path and path.startswith(root_path):
        rest = path[len(root_path):]
        if rest.startswith("/"):
            return rest
    return path


def valid_title(request: Request) -> str:
    """
    요청 경로에서 title 추출 (라우트 어댑터).

    Raises:
        HTTPException: 404 (경로가 /(view|edit|save)/[a-zA-Z0-9]+ 가 아님)
    """
    title = extract_title(_route_path(request))
    if title is None:
        raise HTTPException(status_code=404, detail="Not Found")
    return title


def _internal_error(error: WikiError) -> HTTPException:
    return HTTPException(
        status_code=500,
        detail={"code": error.code, "message": error.message},
    )


def _render(
    renderer: HtmlRenderer, name: str, data: dict[str, Any] | None = None
) -> HTMLResponse:
    try:
        return renderer.render(name, data)
    except RenderError as e:
        raise _internal_error(e) from e


def _redirect(request: Request, url: str) -> RedirectResponse:
    root_path: str = request.scope.get("root_path", "")
    return RedirectResponse(url=root_path + url, status_code=302)


# =============================================================================
# Page Routes (HTML)
# =============================================================================


@router.get("/", response_class=HTMLResponse)
def index_page(
    request: Request,
    page: str | None = None,
    renderer: HtmlRenderer = Depends(get_renderer),
) -> Response:
    """
    인덱스 화면.

    ?page=<title> (인덱스의 이동 폼) 이 유효하면 /view/<title> 로 보냄.
    """
    if page is not None and is_valid_title(page):
        return _redirect(request, VIEW_PREFIX + page)
    return _render(renderer, INDEX_TEMPLATE)


def view_page(
    request: Request,
    title: str = Depends(valid_title),
    store: PageStore = Depends(get_store),
    renderer: HtmlRenderer = Depends(get_renderer),
) -> Response:
    """
    페이지 조회.

    페이지가 없으면 편집 화면으로 보내 새로 만들게 함 (에러 아님).
    """
    try:
        page = store.load(title)
    except PageNotFoundError:
        logger.debug(f"Page '{title}' not found, redirecting to editor")
        return _redirect(request, EDIT_PREFIX + title)
    except PageStoreError as e:
        raise _internal_error(e) from e

    return _render(renderer, VIEW_TEMPLATE, {"page": page})


def edit_page(
    title: str = Depends(valid_title),
    store: PageStore = Depends(get_store),
    renderer: HtmlRenderer = Depends(get_renderer),
) -> Response:
    """편집 화면 (없는 페이지는 빈 본문)."""
    try:
        page = store.load(title)
    except PageNotFoundError:
        page = Page(title=title)
    except PageStoreError as e:
        raise _internal_error(e) from e

    return _render(renderer, EDIT_TEMPLATE, {"page": page})


def save_page(
    request: Request,
    title: str = Depends(valid_title),
    body: str = Form(""),
    store: PageStore = Depends(get_store),
) -> Response:
    """
    페이지 저장.

    저장 실패 시 500만 응답하고 리다이렉트하지 않음.
    """
    page = Page.from_form(title, body)
    try:
        store.save(page)
    except PageStoreError as e:
        raise _internal_error(e) from e

    return _redirect(request, VIEW_PREFIX + title)


# (method, path, endpoint)
WIKI_ROUTES: list[tuple[str, str, Callable[..., Response]]] = [
    ("GET", VIEW_PREFIX + "{title}", view_page),
    ("GET", EDIT_PREFIX + "{title}", edit_page),
    ("POST", SAVE_PREFIX + "{title}", save_page),
]

for _method, _path, _endpoint in WIKI_ROUTES:
    router.add_api_route(
        _path,
        _endpoint,
        methods=[_method],
        response_class=HTMLResponse,
    )


# =============================================================================
# API Routes
# =============================================================================


@api_router.get("")
def list_pages(store: PageStore = Depends(get_store)) -> dict[str, list[str]]:
    """저장된 페이지 title 목록."""
    return {"pages": store.list_titles()}
