"""
포트 인터페이스 테스트

LineSource, AggregateView 포트 인터페이스의 계약을 검증합니다.
모든 어댑터 구현체는 이 인터페이스 계약을 준수해야 합니다.
"""

from collections.abc import Iterator

import pytest

from commission_report.domain.models.transaction import (
    EMPTY_TRANSACTION,
    AccountAggregate,
    Transaction,
)
from commission_report.domain.ports.aggregate_view import AggregateView
from commission_report.domain.ports.line_source import LineSource


class TestLineSourceInterfaceStructure:
    """LineSource 인터페이스 구조 테스트"""

    def test_line_source_is_abstract(self) -> None:
        """
        GIVEN: LineSource 클래스
        WHEN: 직접 인스턴스화를 시도할 때
        THEN: TypeError가 발생해야 함 (추상 클래스)
        """
        with pytest.raises(TypeError):
            LineSource()  # type: ignore

    def test_partial_implementation_cannot_be_instantiated(self) -> None:
        """
        GIVEN: describe()를 구현하지 않은 LineSource 하위 클래스
        WHEN: 인스턴스화를 시도할 때
        THEN: TypeError가 발생해야 함
        """

        class LinesOnlySource(LineSource):
            def lines(self) -> Iterator[str]:
                yield "1,TX1,100.0"

        with pytest.raises(TypeError):
            LinesOnlySource()  # type: ignore

    def test_complete_implementation(self) -> None:
        """
        GIVEN: 모든 추상 메서드를 구현한 LineSource 하위 클래스
        WHEN: lines()를 순회할 때
        THEN: 라인이 순서대로 반환되어야 함
        """

        class StaticSource(LineSource):
            def lines(self) -> Iterator[str]:
                yield from ["1,TX1,100.0", "2,TX2,200.0"]

            def describe(self) -> str:
                return "static"

        source = StaticSource()

        assert list(source.lines()) == ["1,TX1,100.0", "2,TX2,200.0"]
        assert source.describe() == "static"


class TestAggregateViewInterfaceStructure:
    """AggregateView 인터페이스 구조 테스트"""

    def test_aggregate_view_is_abstract(self) -> None:
        with pytest.raises(TypeError):
            AggregateView()  # type: ignore

    def test_aggregate_view_has_required_members(self) -> None:
        """
        GIVEN: AggregateView 인터페이스
        WHEN: 인터페이스 멤버를 확인할 때
        THEN: 모든 필수 멤버가 추상 멤버로 정의되어 있어야 함
        """
        assert AggregateView.__abstractmethods__ == frozenset(
            {"get_aggregates", "get_global_maximum", "transaction_count"}
        )

    def test_complete_implementation(self) -> None:
        class EmptyView(AggregateView):
            def get_aggregates(self) -> list[AccountAggregate]:
                return []

            def get_global_maximum(self) -> Transaction:
                return EMPTY_TRANSACTION

            @property
            def transaction_count(self) -> int:
                return 0

        view = EmptyView()

        assert view.get_aggregates() == []
        assert view.get_global_maximum().is_empty
        assert view.transaction_count == 0
