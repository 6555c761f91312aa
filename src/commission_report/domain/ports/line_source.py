"""
라인 소스 포트 인터페이스

Aggregator에 텍스트 라인을 공급하는 소스의 추상 인터페이스입니다.
Domain Layer와 Application Layer는 이 인터페이스에만 의존하며,
파일, 메모리 리스트 등 실제 구현은 Infrastructure Layer에서 제공됩니다.

이 패턴은 Hexagonal Architecture (Ports and Adapters)의 핵심으로,
집계 로직과 파일 시스템 세부 사항 간의 결합도를 낮춥니다.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator


class LineSource(ABC):
    """
    라인 소스 포트 인터페이스

    유한한 텍스트 라인 시퀀스를 지연(lazy) 방식으로 제공하는 추상 인터페이스입니다.

    Implementation Requirements:
        1. lines()는 라인 끝의 개행 문자를 제거한 문자열을 순서대로 yield해야 함
        2. 전체 내용을 메모리에 올리지 않고 한 줄씩 제공해야 함
        3. 소스를 열 수 없거나 읽는 도중 실패하면 SourceException 계열 예외를 발생시켜야 함
        4. 리소스(파일 핸들 등)는 이터레이션이 끝나면 정리되어야 함

    Examples:
        >>> from commission_report.infrastructure.sources import FileLineSource
        >>>
        >>> source: LineSource = FileLineSource("transactions.csv")
        >>> for line in source.lines():
        ...     print(line)
    """

    @abstractmethod
    def lines(self) -> Iterator[str]:
        """
        라인 스트리밍

        Yields:
            str: 개행 문자가 제거된 라인

        Raises:
            SourceUnavailableError: 소스를 열 수 없는 경우
            SourceReadError: 읽는 도중 오류가 발생한 경우
        """
        pass

    @abstractmethod
    def describe(self) -> str:
        """
        로그와 에러 메시지에 사용할 소스 설명 (예: 파일 경로)

        Returns:
            사람이 읽을 수 있는 소스 이름
        """
        pass
