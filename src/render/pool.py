"""
Buffer Pool: 렌더링용 재사용 버퍼.

규칙:
- 고정 용량 (기본 64), 프로세스 전역으로 1개
- 여러 요청이 동시에 빌리고 반납 (thread-safe)
- 반납은 무조건: borrow() 컨텍스트 매니저가 예외 경로까지 보장
- 풀이 비면 새 버퍼 생성, 가득 차면 반납된 버퍼는 버림
"""

import io
import queue
from collections.abc import Generator
from contextlib import contextmanager

from src.domain.constants import DEFAULT_BUFFER_POOL_SIZE


class BufferPool:
    """
    io.StringIO 버퍼 풀.

    Usage:
        pool = BufferPool(64)
        with pool.borrow() as buf:
            buf.write("...")
    """

    def __init__(self, size: int = DEFAULT_BUFFER_POOL_SIZE):
        if size < 1:
            raise ValueError(f"buffer pool size must be positive: {size}")
        self.size = size
        self._buffers: queue.Queue[io.StringIO] = queue.Queue(maxsize=size)

    @property
    def available(self) -> int:
        """풀에 대기 중인 버퍼 수."""
        return self._buffers.qsize()

    def get(self) -> io.StringIO:
        """버퍼 하나 꺼내기 (없으면 새로 생성)."""
        try:
            return self._buffers.get_nowait()
        except queue.Empty:
            return io.StringIO()

    def put(self, buf: io.StringIO) -> None:
        """버퍼 비우고 반납 (풀이 가득 차면 버림)."""
        buf.seek(0)
        buf.truncate(0)
        try:
            self._buffers.put_nowait(buf)
        except queue.Full:
            pass

    @contextmanager
    def borrow(self) -> Generator[io.StringIO, None, None]:
        """
        버퍼 대여 컨텍스트.

        Yields:
            비어 있는 버퍼 (블록 종료 시 정상/예외 모두 반납)
        """
        buf = self.get()
        try:
            yield buf
        finally:
            self.put(buf)
