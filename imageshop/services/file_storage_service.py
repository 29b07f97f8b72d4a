"""
업로드 파일 저장소

설정된 단일 디렉터리에 ``<uuid4>_<원본파일명>`` 형태로 파일을 저장하고 다시
읽어 준다. 파일 종류/크기 검증은 하지 않는다.
"""

import logging
import os
import uuid
from pathlib import Path
from typing import Optional

from imageshop.config import Settings
from imageshop.core.exceptions import FileStorageError

logger = logging.getLogger(__name__)

# 확장자(대문자) -> Content-Type. 이 외의 확장자는 Content-Type 없이 응답
MEDIA_TYPES = {
    "JPG": "image/jpeg",
    "GIF": "image/gif",
    "PNG": "image/png",
}


def get_format_name(file_name: str) -> str:
    """마지막 '.' 이후 문자열 (없으면 빈 문자열)"""
    if "." not in file_name:
        return ""
    return file_name[file_name.rindex(".") + 1:]


def get_media_type(format_name: Optional[str]) -> Optional[str]:
    if not format_name:
        return None
    return MEDIA_TYPES.get(format_name.upper())


class FileStorageService:
    """업로드 디렉터리 읽기/쓰기"""

    def __init__(self, settings: Settings):
        self.upload_path = Path(settings.UPLOAD_PATH)

    def _target(self, stored_name: str) -> Path:
        # 저장소 밖을 가리키는 이름 거부 (../, 절대경로)
        if not stored_name or os.path.basename(stored_name) != stored_name:
            raise FileStorageError(stored_name or "", "invalid file name")
        return self.upload_path / stored_name

    def upload_file(self, original_name: str, file_data: bytes) -> str:
        """파일 저장 후 저장된 파일명 반환

        Args:
            original_name: 업로드된 원본 파일명
            file_data: 파일 내용

        Returns:
            str: ``<uuid4>_<원본파일명>``
        """
        original_name = os.path.basename(original_name or "")
        created_file_name = f"{uuid.uuid4()}_{original_name}"
        target = self._target(created_file_name)

        try:
            self.upload_path.mkdir(parents=True, exist_ok=True)
            with open(target, "wb") as f:
                f.write(file_data)
        except OSError as e:
            logger.error(f"Failed to store upload {created_file_name}: {str(e)}")
            raise FileStorageError(created_file_name, str(e)) from e

        logger.info(f"Stored upload {created_file_name} ({len(file_data)} bytes)")
        return created_file_name

    def load_file(self, stored_name: str) -> bytes:
        """저장된 파일 내용 읽기 - 파일이 없거나 읽기 실패 시 FileStorageError"""
        target = self._target(stored_name)
        try:
            with open(target, "rb") as f:
                return f.read()
        except OSError as e:
            raise FileStorageError(stored_name, str(e)) from e

    def delete_file(self, stored_name: str) -> None:
        """저장된 파일 삭제 - 이미 없으면 무시"""
        target = self._target(stored_name)
        try:
            target.unlink(missing_ok=True)
        except OSError as e:
            raise FileStorageError(stored_name, str(e)) from e
        logger.info(f"Deleted upload {stored_name}")
