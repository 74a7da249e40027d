"""
Error definitions for the wiki.

규칙:
- 조용한 실패 금지 → WikiError 계열로 명시적 실패
- "페이지 없음"과 그 외 I/O 실패는 구분 (PageNotFoundError vs PageStoreError)
- 라우트에서 HTTP 상태로 변환 (404 / 500)
"""

from typing import Any


class WikiError(Exception):
    """
    위키 도메인 에러의 기반 클래스.

    Usage:
        raise RenderError(ErrorCodes.TEMPLATE_NOT_FOUND, "...", name="view.html")
    """

    def __init__(self, code: str, message: str, **context: Any) -> None:
        self.code = code
        self.message = message
        self.context = context
        super().__init__(f"[{code}] {message}")

    def to_dict(self) -> dict[str, Any]:
        """로그/JSON 직렬화용."""
        return {
            "code": self.code,
            "message": self.message,
            **self.context,
        }


class InvalidTitleError(WikiError):
    """title이 [a-zA-Z0-9]+ 규칙을 벗어남."""


class PageNotFoundError(WikiError):
    """저장소에 해당 title의 파일이 없음 (복구 가능)."""


class PageStoreError(WikiError):
    """파일 읽기/쓰기 실패 (복구 불가)."""


class TemplateSetError(WikiError):
    """시작 시 템플릿 세트 구성 실패 (치명적)."""


class RenderError(WikiError):
    """요청 처리 중 템플릿 조회/실행 실패."""


# =============================================================================
# Error Codes
# =============================================================================

class ErrorCodes:
    """에러 코드 상수."""

    # === Routing / Title ===
    INVALID_TITLE = "INVALID_TITLE"

    # === Page Store ===
    PAGE_NOT_FOUND = "PAGE_NOT_FOUND"  # 복구됨 (view → edit, edit → 빈 페이지)
    PAGE_READ_FAILED = "PAGE_READ_FAILED"
    PAGE_SAVE_FAILED = "PAGE_SAVE_FAILED"

    # === Templates ===
    TEMPLATE_SET_INVALID = "TEMPLATE_SET_INVALID"  # startup, fatal
    TEMPLATE_NOT_FOUND = "TEMPLATE_NOT_FOUND"
    RENDER_FAILED = "RENDER_FAILED"
