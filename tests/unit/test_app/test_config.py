"""
test_config.py - 설정 로드 테스트

- default.yaml → Settings
- 상대 경로는 프로젝트 루트 기준
- WIKI_CONFIG 환경 변수
"""

from pathlib import Path

import pytest

from src.app.config import (
    APP_TEMPLATES_DIR,
    CONFIG_ENV_VAR,
    PROJECT_ROOT,
    Settings,
    load_config,
)
from src.domain.constants import DEFAULT_BUFFER_POOL_SIZE, DEFAULT_PORT


class TestLoadConfig:
    """load_config 테스트."""

    def test_missing_file_returns_empty(self, tmp_path: Path):
        """파일 없음 → 빈 dict."""
        assert load_config(tmp_path / "missing.yaml") == {}

    def test_empty_file_returns_empty(self, tmp_path: Path):
        """빈 파일 → 빈 dict."""
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")

        assert load_config(path) == {}

    def test_env_var_overrides_default(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        """WIKI_CONFIG 가 가리키는 파일 사용."""
        path = tmp_path / "custom.yaml"
        path.write_text("server:\n  port: 9999\n", encoding="utf-8")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(path))

        assert load_config() == {"server": {"port": 9999}}

    def test_default_yaml_is_valid(self, default_config: dict):
        """프로젝트 default.yaml 이 기본값과 일치."""
        settings = Settings.from_config(default_config)

        assert settings == Settings()


class TestSettings:
    """Settings.from_config 테스트."""

    def test_defaults(self):
        """빈 설정 → 기본값."""
        settings = Settings.from_config({})

        assert settings.data_dir == PROJECT_ROOT / "data"
        assert settings.template_layout_dir == APP_TEMPLATES_DIR / "layouts"
        assert settings.template_include_dir == APP_TEMPLATES_DIR
        assert settings.buffer_pool_size == DEFAULT_BUFFER_POOL_SIZE
        assert settings.port == DEFAULT_PORT

    def test_relative_paths_resolved_against_root(self, tmp_path: Path):
        """상대 경로 → root 기준."""
        settings = Settings.from_config(
            {"paths": {"data_dir": "pages", "template_include_dir": "tpl"}},
            root=tmp_path,
        )

        assert settings.data_dir == tmp_path / "pages"
        assert settings.template_include_dir == tmp_path / "tpl"

    def test_absolute_paths_kept(self, tmp_path: Path):
        """절대 경로는 그대로."""
        settings = Settings.from_config({"paths": {"data_dir": str(tmp_path)}})

        assert settings.data_dir == tmp_path

    def test_scalar_values(self):
        """server / render / logging 값."""
        settings = Settings.from_config(
            {
                "server": {"host": "0.0.0.0", "port": "8000"},
                "render": {"buffer_pool_size": 8},
                "logging": {"level": "debug"},
            }
        )

        assert settings.host == "0.0.0.0"
        assert settings.port == 8000
        assert settings.buffer_pool_size == 8
        assert settings.log_level == "DEBUG"
