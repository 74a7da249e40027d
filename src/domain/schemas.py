"""
Data schemas for the wiki.

Page는 요청 단위로 생성되고 요청이 끝나면 버려짐 (캐시 없음).
"""

from dataclasses import dataclass

from src.domain.constants import PAGE_ENCODING


@dataclass
class Page:
    """
    위키 페이지.

    title: 영숫자 식별자 (파일명 stem)
    body: 원본 바이트 (파일 내용 그대로)
    """
    title: str
    body: bytes = b""

    @property
    def text(self) -> str:
        """템플릿 출력용 본문 (디코딩 불가 바이트는 대체 문자)."""
        return self.body.decode(PAGE_ENCODING, errors="replace")

    @classmethod
    def from_form(cls, title: str, body: str) -> "Page":
        """폼 입력(str) → Page."""
        return cls(title=title, body=body.encode(PAGE_ENCODING))
