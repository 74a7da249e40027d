"""
설정: default.yaml → Settings.

우선순위:
1. create_app(settings=...) 로 직접 주입 (테스트)
2. WIKI_CONFIG 환경 변수가 가리키는 YAML
3. 프로젝트 루트의 default.yaml
4. 코드 기본값

상대 경로는 프로젝트 루트 기준으로 해석.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from src.domain.constants import (
    DEFAULT_BUFFER_POOL_SIZE,
    DEFAULT_HOST,
    DEFAULT_LOG_LEVEL,
    DEFAULT_PORT,
)

PROJECT_ROOT = Path(__file__).parent.parent.parent
APP_TEMPLATES_DIR = Path(__file__).parent / "templates"

CONFIG_ENV_VAR = "WIKI_CONFIG"


def load_config(config_path: Path | None = None) -> dict:
    """설정 파일 로드 (없으면 빈 dict)."""
    if config_path is None:
        env_path = os.getenv(CONFIG_ENV_VAR)
        config_path = Path(env_path) if env_path else PROJECT_ROOT / "default.yaml"

    if not config_path.exists():
        return {}

    with open(config_path, encoding="utf-8") as f:
        data: dict[Any, Any] = yaml.safe_load(f) or {}
        return data


def _resolve(path: str | Path, root: Path) -> Path:
    path = Path(path)
    return path if path.is_absolute() else root / path


@dataclass(frozen=True)
class Settings:
    """실행 설정 (시작 후 불변)."""
    data_dir: Path = PROJECT_ROOT / "data"
    template_layout_dir: Path = APP_TEMPLATES_DIR / "layouts"
    template_include_dir: Path = APP_TEMPLATES_DIR

    buffer_pool_size: int = DEFAULT_BUFFER_POOL_SIZE

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_config(cls, config: dict, root: Path = PROJECT_ROOT) -> "Settings":
        """
        설정 dict → Settings.

        Args:
            config: load_config() 결과
                - paths.data_dir, paths.template_layout_dir, paths.template_include_dir
                - render.buffer_pool_size
                - server.host, server.port
                - logging.level
            root: 상대 경로 기준 디렉터리

        Returns:
            Settings (없는 키는 기본값)
        """
        defaults = cls()
        paths = config.get("paths", {}) or {}
        render = config.get("render", {}) or {}
        server = config.get("server", {}) or {}
        logging_config = config.get("logging", {}) or {}

        return cls(
            data_dir=_resolve(paths.get("data_dir", defaults.data_dir), root),
            template_layout_dir=_resolve(
                paths.get("template_layout_dir", defaults.template_layout_dir), root
            ),
            template_include_dir=_resolve(
                paths.get("template_include_dir", defaults.template_include_dir), root
            ),
            buffer_pool_size=int(
                render.get("buffer_pool_size", defaults.buffer_pool_size)
            ),
            host=str(server.get("host", defaults.host)),
            port=int(server.get("port", defaults.port)),
            log_level=str(logging_config.get("level", defaults.log_level)).upper(),
        )


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """루트 로거 설정 (이미 핸들러가 있으면 basicConfig는 무시됨)."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
