"""
메모리 기반 라인 소스

리스트, 제너레이터, 표준 입력 등 이미 열려 있는 문자열 이터러블을 LineSource로 감쌉니다.
"""

from collections.abc import Iterable, Iterator

from commission_report.domain.exceptions import SourceReadError
from commission_report.domain.ports.line_source import LineSource


class IterableLineSource(LineSource):
    """문자열 이터러블을 감싸는 LineSource 어댑터"""

    def __init__(self, lines: Iterable[str], name: str = "memory") -> None:
        """
        Args:
            lines: 라인 이터러블 (끝의 개행 문자는 제거됨)
            name: 로그에 표시할 소스 이름
        """
        self._lines = lines
        self._name = name

    def lines(self) -> Iterator[str]:
        try:
            for line in self._lines:
                yield line.rstrip("\r\n")
        except (OSError, UnicodeDecodeError) as e:
            raise SourceReadError(f"Failed to read lines from {self._name}", cause=e) from e

    def describe(self) -> str:
        return self._name
