"""
FastAPI 애플리케이션 진입점.

실행:
- 개발: uvicorn src.app.main:app --reload
- 프로덕션: python -m src.app.main
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from src.app.config import Settings, configure_logging, load_config
from src.app.routes import wiki
from src.core.pages import PageStore
from src.render.html import HtmlRenderer, TemplateSet
from src.render.pool import BufferPool

# =============================================================================
# Lifespan
# =============================================================================


def build_state(app: FastAPI, settings: Settings) -> None:
    """
    요청 처리에 필요한 공유 객체 구성.

    - store: PageStore (data_dir)
    - renderer: HtmlRenderer (TemplateSet + BufferPool)
      TemplateSet 구성 실패 시 TemplateSetError → 서버 시작 중단
    """
    templates = TemplateSet.load(
        settings.template_layout_dir,
        settings.template_include_dir,
    )
    pool = BufferPool(settings.buffer_pool_size)

    app.state.settings = settings
    app.state.store = PageStore(settings.data_dir)
    app.state.renderer = HtmlRenderer(templates, pool)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    애플리케이션 생명주기 관리.

    시작 시: 로깅 설정, 템플릿 세트/버퍼 풀/저장소 구성
    종료 시: 정리할 리소스 없음
    """
    settings: Settings = app.state.settings
    configure_logging(settings.log_level)
    build_state(app, settings)

    yield


# =============================================================================
# App Factory
# =============================================================================


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    FastAPI 앱 생성.

    Args:
        settings: 실행 설정 (None이면 default.yaml 로드)

    Returns:
        라우트가 등록된 FastAPI 앱 (공유 객체는 lifespan에서 구성)
    """
    if settings is None:
        settings = Settings.from_config(load_config())

    app = FastAPI(
        title="Flat-file Wiki",
        description="평면 파일 기반 위키: 조회 / 편집 / 저장",
        version="0.1.0",
        lifespan=lifespan,
        # /view/Foo/ 는 404 (슬래시 제거 리다이렉트 금지)
        redirect_slashes=False,
    )
    app.state.settings = settings

    # Static files (CSS)
    static_dir = Path(__file__).parent / "static"
    if static_dir.exists():
        app.mount("/static", StaticFiles(directory=static_dir), name="static")

    app.include_router(wiki.router, tags=["Wiki"])
    app.include_router(wiki.api_router, prefix="/api/pages", tags=["Wiki API"])

    @app.get("/health")
    async def health() -> dict[str, str]:
        """헬스 체크."""
        return {"status": "ok"}

    return app


app = create_app()


# =============================================================================
# CLI Entry Point
# =============================================================================

if __name__ == "__main__":
    import uvicorn
    from dotenv import load_dotenv

    load_dotenv()
    settings = Settings.from_config(load_config())

    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
