"""
Title Validator: 요청 경로 → 페이지 title.

규칙:
- /(edit|save|view)/<title> 형태만 허용
- title은 [a-zA-Z0-9]+ (빈 문자열, /, ., -, 유니코드 모두 거부)
- 이 검증이 Page Store의 경로 탈출 방어선
"""

import re

from src.domain.constants import TITLE_CHARS, TITLE_OPERATIONS
from src.domain.errors import ErrorCodes, InvalidTitleError

VALID_PATH = re.compile(rf"^/({'|'.join(TITLE_OPERATIONS)})/({TITLE_CHARS})$")
VALID_TITLE = re.compile(rf"^{TITLE_CHARS}$")


def extract_title(path: str) -> str | None:
    """
    요청 경로에서 title 추출.

    Args:
        path: 요청 URL 경로 (예: "/view/FrontPage")

    Returns:
        title (일치하지 않으면 None)
    """
    match = VALID_PATH.fullmatch(path)
    if match is None:
        return None
    return match.group(2)


def is_valid_title(title: str) -> bool:
    """title 형식 검사."""
    return VALID_TITLE.fullmatch(title) is not None


def validate_title(title: str) -> None:
    """
    title 유효성 검증.

    Raises:
        InvalidTitleError: INVALID_TITLE
    """
    if not is_valid_title(title):
        raise InvalidTitleError(
            ErrorCodes.INVALID_TITLE,
            "title must be one or more ASCII letters or digits",
            title=title,
        )
