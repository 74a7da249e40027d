"""
HTML 렌더러: Jinja2 기반.

시작 시 (TemplateSet.load):
1. 루트 "main" 템플릿 = {% extends "base.html" %}
2. layouts/*.html, 그리고 include 디렉터리의 *.html 수집
3. include 파일마다 main + include 소스 → 하나의 완성된 템플릿
   (키: include 파일명, 예: "view.html")
4. 실패 (디렉터리 없음, base.html 없음, 문법 오류) → TemplateSetError (치명적)

요청 시 (HtmlRenderer.render):
- 없는 이름 → RenderError(TEMPLATE_NOT_FOUND)
- 풀에서 빌린 버퍼에 먼저 렌더링, 실패 시 RenderError(RENDER_FAILED)
- 성공 시에만 응답 생성 → 실패한 렌더링이 반쪽 페이지로 새어 나가지 않음
"""

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from fastapi.responses import HTMLResponse
from jinja2 import (
    DictLoader,
    Environment,
    StrictUndefined,
    Template,
    TemplateError,
)

from src.domain.constants import (
    BASE_LAYOUT,
    HTML_CONTENT_TYPE,
    MAIN_TEMPLATE,
    MAIN_TEMPLATE_NAME,
    TEMPLATE_GLOB,
)
from src.domain.errors import ErrorCodes, RenderError, TemplateSetError
from src.render.pool import BufferPool

logger = logging.getLogger(__name__)


def _glob_templates(directory: Path) -> list[Path]:
    """
    디렉터리의 *.html 목록 (정렬).

    Raises:
        TemplateSetError: TEMPLATE_SET_INVALID (디렉터리 없음)
    """
    if not directory.is_dir():
        raise TemplateSetError(
            ErrorCodes.TEMPLATE_SET_INVALID,
            f"template directory does not exist: {directory}",
            path=str(directory),
        )
    return sorted(p for p in directory.glob(TEMPLATE_GLOB) if p.is_file())


def _read_sources(files: list[Path]) -> dict[str, str]:
    """파일명 → 템플릿 소스."""
    sources: dict[str, str] = {}
    for path in files:
        try:
            sources[path.name] = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise TemplateSetError(
                ErrorCodes.TEMPLATE_SET_INVALID,
                f"failed to read template {path}: {e}",
                path=str(path),
            ) from e
    return sources


# =============================================================================
# Template Set
# =============================================================================


class TemplateSet:
    """
    이름 → 컴파일된 템플릿 (읽기 전용).

    시작 시 한 번 만들고 이후 변경하지 않음 → 동시 읽기 안전.
    """

    def __init__(self, templates: dict[str, Template]):
        self._templates = dict(templates)

    def __contains__(self, name: object) -> bool:
        return name in self._templates

    def __len__(self) -> int:
        return len(self._templates)

    @property
    def names(self) -> list[str]:
        return sorted(self._templates)

    def get(self, name: str) -> Template | None:
        return self._templates.get(name)

    @classmethod
    def load(cls, layout_dir: Path, include_dir: Path) -> "TemplateSet":
        """
        레이아웃 + include 파일로 템플릿 세트 구성.

        Args:
            layout_dir: 공통 레이아웃 디렉터리 (base.html 필수)
            include_dir: 페이지별 include 디렉터리

        Returns:
            include 파일명으로 키잉된 TemplateSet

        Raises:
            TemplateSetError: TEMPLATE_SET_INVALID
        """
        layout_sources = _read_sources(_glob_templates(layout_dir))
        include_sources = _read_sources(_glob_templates(include_dir))

        if BASE_LAYOUT not in layout_sources:
            raise TemplateSetError(
                ErrorCodes.TEMPLATE_SET_INVALID,
                f"base layout '{BASE_LAYOUT}' not found in {layout_dir}",
                path=str(layout_dir),
            )

        # 레이아웃은 메모리에 고정 (hot reload 없음)
        env = Environment(
            loader=DictLoader({MAIN_TEMPLATE_NAME: MAIN_TEMPLATE, **layout_sources}),
            autoescape=True,
            undefined=StrictUndefined,
            auto_reload=False,
        )

        templates: dict[str, Template] = {}
        try:
            env.get_template(MAIN_TEMPLATE_NAME)
            for layout_name in layout_sources:
                env.get_template(layout_name)

            for name, source in include_sources.items():
                templates[name] = env.from_string(MAIN_TEMPLATE + source)
        except TemplateError as e:
            raise TemplateSetError(
                ErrorCodes.TEMPLATE_SET_INVALID,
                f"failed to compile templates: {e}",
                layout_dir=str(layout_dir),
                include_dir=str(include_dir),
            ) from e

        if not templates:
            logger.warning(f"No page templates found in {include_dir}")

        logger.info(
            f"Templates loaded successfully: {len(templates)} pages, "
            f"{len(layout_sources)} layouts"
        )
        return cls(templates)


# =============================================================================
# Renderer
# =============================================================================


class HtmlRenderer:
    """
    TemplateSet + BufferPool 기반 HTML 렌더러.

    Usage:
        renderer = HtmlRenderer(template_set, BufferPool(64))
        response = renderer.render("view.html", {"page": page})
    """

    def __init__(self, templates: TemplateSet, pool: BufferPool):
        self.templates = templates
        self.pool = pool

    def render(
        self,
        name: str,
        data: Mapping[str, Any] | None = None,
    ) -> HTMLResponse:
        """
        템플릿 렌더링 → HTML 응답.

        Args:
            name: 템플릿 이름 (include 파일명)
            data: 템플릿 컨텍스트

        Returns:
            text/html; charset=utf-8 응답

        Raises:
            RenderError: TEMPLATE_NOT_FOUND, RENDER_FAILED
        """
        template = self.templates.get(name)
        if template is None:
            raise RenderError(
                ErrorCodes.TEMPLATE_NOT_FOUND,
                f"the template {name} does not exist",
                name=name,
            )

        with self.pool.borrow() as buf:
            try:
                for chunk in template.generate(**(data or {})):
                    buf.write(chunk)
            except Exception as e:
                logger.error(f"Rendering {name} failed: {e}", exc_info=True)
                raise RenderError(
                    ErrorCodes.RENDER_FAILED,
                    str(e),
                    name=name,
                ) from e

            content = buf.getvalue()

        return HTMLResponse(
            content=content,
            headers={"Content-Type": HTML_CONTENT_TYPE},
        )
