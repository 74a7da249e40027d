"""
Domain Constants: 위키 전역 상수.

경로 규칙, 템플릿 이름, 기본 설정값 등 시스템 전반에서 사용되는 값들.
"""

# =============================================================================
# Titles & Routes
# =============================================================================
# title = 페이지의 유일한 키이자 파일명 stem
# 영숫자 외 문자(/, .., - 등)는 전부 거부 → 경로 탈출 차단

TITLE_CHARS = "[a-zA-Z0-9]+"
TITLE_OPERATIONS = ("edit", "save", "view")

VIEW_PREFIX = "/view/"
EDIT_PREFIX = "/edit/"
SAVE_PREFIX = "/save/"

# =============================================================================
# Backing Store (페이지 저장소)
# =============================================================================
# data/
# ├── FrontPage.txt
# └── <title>.txt

PAGE_FILE_SUFFIX = ".txt"
PAGE_FILE_MODE = 0o600  # 소유자만 읽기/쓰기
PAGE_ENCODING = "utf-8"

# =============================================================================
# Templates (템플릿 구조)
# =============================================================================
# src/app/templates/
# ├── layouts/
# │   └── base.html    # 공통 레이아웃 ("base")
# ├── index.html
# ├── view.html
# └── edit.html

TEMPLATE_GLOB = "*.html"
BASE_LAYOUT = "base.html"
MAIN_TEMPLATE_NAME = "main"
MAIN_TEMPLATE = '{% extends "' + BASE_LAYOUT + '" %}'

INDEX_TEMPLATE = "index.html"
VIEW_TEMPLATE = "view.html"
EDIT_TEMPLATE = "edit.html"

HTML_CONTENT_TYPE = "text/html; charset=utf-8"

# =============================================================================
# Defaults
# =============================================================================

DEFAULT_BUFFER_POOL_SIZE = 64
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080
DEFAULT_LOG_LEVEL = "INFO"
