"""
파일 기반 라인 소스

LineSource 인터페이스를 구현하여 텍스트 파일을 한 줄씩 스트리밍합니다.
파일 전체를 메모리에 올리지 않으므로 메모리보다 큰 파일도 처리할 수 있습니다.
"""

import logging
from collections.abc import Iterator
from pathlib import Path

from commission_report.domain.exceptions import SourceReadError, SourceUnavailableError
from commission_report.domain.ports.line_source import LineSource

logger = logging.getLogger(__name__)


class FileLineSource(LineSource):
    """
    텍스트 파일 라인 소스

    파일은 lines() 이터레이션이 시작될 때 열리고, 끝나거나 중단되면 닫힙니다.
    OSError와 UnicodeDecodeError는 도메인 예외로 변환됩니다.

    Attributes:
        _path: 읽을 파일 경로
        _encoding: 파일 인코딩
    """

    def __init__(self, path: str | Path, encoding: str = "utf-8") -> None:
        """
        Args:
            path: 읽을 파일 경로
            encoding: 파일 인코딩 (기본값: utf-8)
        """
        self._path = Path(path)
        self._encoding = encoding

    @property
    def path(self) -> Path:
        return self._path

    def lines(self) -> Iterator[str]:
        """
        파일 라인 스트리밍

        Yields:
            str: 끝의 "\\n" / "\\r\\n"이 제거된 라인

        Raises:
            SourceUnavailableError: 파일이 없거나, 일반 파일이 아니거나, 열 수 없는 경우
            SourceReadError: 읽는 도중 I/O 또는 디코딩 오류가 발생한 경우
        """
        if not self._path.exists():
            raise SourceUnavailableError(f"Transaction file does not exist: {self._path}")
        if not self._path.is_file():
            raise SourceUnavailableError(f"Transaction path is not a file: {self._path}")

        logger.debug(f"Opening transaction file {self._path} (encoding={self._encoding})")

        try:
            f = open(self._path, "r", encoding=self._encoding, newline="")
        except OSError as e:
            raise SourceUnavailableError(f"Cannot open transaction file {self._path}", cause=e) from e

        line_number = 0
        try:
            with f:
                for raw_line in f:
                    line_number += 1
                    yield raw_line.rstrip("\r\n")
        except (OSError, UnicodeDecodeError) as e:
            raise SourceReadError(
                f"Failed to read {self._path} after line {line_number}", cause=e
            ) from e

    def describe(self) -> str:
        return str(self._path)

    def __repr__(self) -> str:
        return f"FileLineSource(path='{self._path}', encoding='{self._encoding}')"
