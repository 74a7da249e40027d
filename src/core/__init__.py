"""
Core layer: 페이지 저장소.

역할:
- title → <data_dir>/<title>.txt 매핑
- 원자적 쓰기 (temp → rename + fsync)
"""

from .pages import PageStore, atomic_write_bytes

__all__ = [
    "PageStore",
    "atomic_write_bytes",
]
