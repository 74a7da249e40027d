"""
Render layer: HTML 출력 생성.

역할:
- 템플릿 세트 구성 (시작 시 1회)
- 버퍼 풀에 먼저 렌더링 → 성공 시에만 응답
"""

from .html import HtmlRenderer, TemplateSet
from .pool import BufferPool

__all__ = [
    "BufferPool",
    "HtmlRenderer",
    "TemplateSet",
]
