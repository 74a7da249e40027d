"""
Page Store: 평면 파일 저장소.

규칙:
- 페이지 1개 = 파일 1개: <data_dir>/<title>.txt
- title이 유일한 키 (인덱스, 메타데이터, 락 없음)
- 캐시 없음: load는 매번 디스크에서 읽음
- 원자적 쓰기: temp → fsync → rename (중간 상태 노출 없음)
- 권한: 0o600 (소유자만)

파일시스템 안정성 (best-effort):
- fsync 실패 시 경고 남기고 계속 진행
- 동일 title 동시 저장은 조정하지 않음 (마지막 rename이 남음)
"""

import logging
import os
import tempfile
from pathlib import Path

from src.domain.constants import PAGE_FILE_MODE, PAGE_FILE_SUFFIX
from src.domain.errors import ErrorCodes, PageNotFoundError, PageStoreError
from src.domain.schemas import Page
from src.domain.titles import is_valid_title, validate_title

logger = logging.getLogger(__name__)


# =============================================================================
# Atomic Write
# =============================================================================


def _fsync_dir(dir_path: Path) -> None:
    """
    디렉토리 fsync (가능한 환경에서).

    rename 후 디렉토리 엔트리까지 내구성을 강화하려면 필요.

    Args:
        dir_path: fsync할 디렉토리 경로
    """
    try:
        dir_fd = os.open(str(dir_path), os.O_RDONLY | os.O_DIRECTORY)
        try:
            os.fsync(dir_fd)
        finally:
            os.close(dir_fd)
    except (OSError, AttributeError) as e:
        # O_DIRECTORY 미지원, 권한 문제 등
        logger.warning(
            f"Directory fsync failed for {dir_path}: {e}. "
            f"Rename durability may not be guaranteed."
        )


def atomic_write_bytes(path: Path, data: bytes, mode: int = PAGE_FILE_MODE) -> None:
    """
    원자적 바이트 쓰기.

    동작:
    - 중간 상태 없음: temp → rename
    - 파일 fsync + 디렉토리 fsync (실패 시 경고만)
    - 실패 시 temp 파일 삭제, 기존 파일 보존

    Args:
        path: 저장할 파일 경로
        data: 파일 내용 전체
        mode: 파일 권한
    """
    dir_path = path.parent
    dir_path.mkdir(parents=True, exist_ok=True)

    temp_path = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="wb",
            dir=dir_path,
            suffix=".tmp",
            delete=False,
        ) as f:
            temp_path = Path(f.name)
            f.write(data)
            f.flush()
            try:
                os.fsync(f.fileno())
            except OSError as e:
                logger.warning(
                    f"File fsync failed for {path}: {e}. "
                    f"Data may not be durable on power loss."
                )

        os.chmod(temp_path, mode)
        os.replace(temp_path, path)

        _fsync_dir(dir_path)

    except Exception:
        if temp_path and temp_path.exists():
            try:
                temp_path.unlink()
            except OSError:
                pass
        raise


# =============================================================================
# Page Store
# =============================================================================


class PageStore:
    """
    title → 파일 매핑 저장소.

    Usage:
        store = PageStore(Path("data"))
        store.save(Page(title="FrontPage", body=b"Hello"))
        page = store.load("FrontPage")
    """

    def __init__(self, data_dir: Path):
        self.data_dir = Path(data_dir)

    def path_for(self, title: str) -> Path:
        """
        title → 파일 경로.

        Raises:
            InvalidTitleError: INVALID_TITLE (경로 탈출 방지)
        """
        validate_title(title)
        return self.data_dir / f"{title}{PAGE_FILE_SUFFIX}"

    def load(self, title: str) -> Page:
        """
        페이지 로드.

        Args:
            title: 페이지 title

        Returns:
            파일 내용 전체를 담은 Page

        Raises:
            PageNotFoundError: PAGE_NOT_FOUND (파일 없음)
            PageStoreError: PAGE_READ_FAILED (그 외 I/O 실패)
        """
        path = self.path_for(title)
        try:
            body = path.read_bytes()
        except FileNotFoundError as e:
            raise PageNotFoundError(
                ErrorCodes.PAGE_NOT_FOUND,
                f"page '{title}' does not exist",
                title=title,
            ) from e
        except OSError as e:
            logger.error(f"Failed to read page {path}: {e}")
            raise PageStoreError(
                ErrorCodes.PAGE_READ_FAILED,
                f"failed to read page '{title}': {e}",
                title=title,
            ) from e

        return Page(title=title, body=body)

    def save(self, page: Page) -> Path:
        """
        페이지 저장 (기존 내용 전체 덮어쓰기).

        Args:
            page: 저장할 Page

        Returns:
            저장된 파일 경로

        Raises:
            PageStoreError: PAGE_SAVE_FAILED
        """
        path = self.path_for(page.title)
        try:
            atomic_write_bytes(path, page.body)
        except OSError as e:
            logger.error(f"Failed to save page {path}: {e}")
            raise PageStoreError(
                ErrorCodes.PAGE_SAVE_FAILED,
                f"failed to save page '{page.title}': {e}",
                title=page.title,
            ) from e

        logger.info(f"Saved page '{page.title}' ({len(page.body)} bytes)")
        return path

    def list_titles(self) -> list[str]:
        """
        저장된 페이지 title 목록 (정렬).

        title 규칙에 맞지 않는 파일(임시 파일 등)은 제외.
        """
        if not self.data_dir.is_dir():
            return []

        titles = [
            path.stem
            for path in self.data_dir.glob(f"*{PAGE_FILE_SUFFIX}")
            if path.is_file() and is_valid_title(path.stem)
        ]
        return sorted(titles)
