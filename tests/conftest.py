"""
Pytest fixtures for the wiki tests.

구성:
- 경로/설정 fixture (default.yaml)
- 테스트용 템플릿 세트 (tmp_path 에 생성)
- create_app 으로 만든 격리된 앱 + TestClient
"""

from collections.abc import Generator
from pathlib import Path

import pytest
import yaml
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.app.config import APP_TEMPLATES_DIR, Settings
from src.app.main import create_app

# =============================================================================
# Path Fixtures
# =============================================================================

@pytest.fixture
def project_root() -> Path:
    """프로젝트 루트 경로."""
    return Path(__file__).parent.parent


@pytest.fixture
def default_config_path(project_root: Path) -> Path:
    """default.yaml 경로."""
    return project_root / "default.yaml"


@pytest.fixture
def default_config(default_config_path: Path) -> dict:
    """기본 설정 로드."""
    with open(default_config_path, encoding="utf-8") as f:
        return yaml.safe_load(f)


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """페이지 저장 디렉터리 (비어 있음)."""
    path = tmp_path / "data"
    path.mkdir()
    return path


# =============================================================================
# Template Fixtures
# =============================================================================

BASE_LAYOUT = """<html><head><title>{% block title %}{% endblock %}</title></head>
<body>{% block content %}{% endblock %}</body></html>
"""

FIXTURE_INCLUDES = {
    "index.html": "{% block title %}Index{% endblock %}{% block content %}<h1>Index</h1>{% endblock %}",
    "view.html": (
        "{% block title %}{{ page.title }}{% endblock %}"
        "{% block content %}<h1>{{ page.title }}</h1><div>{{ page.text }}</div>{% endblock %}"
    ),
    "edit.html": (
        "{% block title %}Editing {{ page.title }}{% endblock %}"
        "{% block content %}<form action=\"/save/{{ page.title }}\" method=\"POST\">"
        "<textarea name=\"body\">{{ page.text }}</textarea></form>{% endblock %}"
    ),
    # 렌더 도중 실패: 앞부분 출력 후 존재하지 않는 속성 접근
    "broken.html": (
        "{% block content %}<p>partial output</p>{{ page.no_such_field }}{% endblock %}"
    ),
}


@pytest.fixture
def template_dirs(tmp_path: Path) -> tuple[Path, Path]:
    """
    테스트용 템플릿 디렉터리.

    Returns:
        (layout_dir, include_dir)
    """
    include_dir = tmp_path / "templates"
    layout_dir = include_dir / "layouts"
    layout_dir.mkdir(parents=True)

    (layout_dir / "base.html").write_text(BASE_LAYOUT, encoding="utf-8")
    for name, source in FIXTURE_INCLUDES.items():
        (include_dir / name).write_text(source, encoding="utf-8")

    return layout_dir, include_dir


# =============================================================================
# App Fixtures
# =============================================================================

@pytest.fixture
def settings(data_dir: Path, template_dirs: tuple[Path, Path]) -> Settings:
    """테스트용 설정 (fixture 템플릿 + tmp data_dir)."""
    layout_dir, include_dir = template_dirs
    return Settings(
        data_dir=data_dir,
        template_layout_dir=layout_dir,
        template_include_dir=include_dir,
        buffer_pool_size=4,
    )


@pytest.fixture
def app_settings(data_dir: Path) -> Settings:
    """실제 앱 템플릿 + tmp data_dir."""
    return Settings(
        data_dir=data_dir,
        template_layout_dir=APP_TEMPLATES_DIR / "layouts",
        template_include_dir=APP_TEMPLATES_DIR,
    )


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    """fixture 템플릿으로 구성된 앱."""
    return create_app(settings)


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    """FastAPI TestClient (리다이렉트 따라가지 않음)."""
    with TestClient(app, follow_redirects=False) as client:
        yield client
