"""
집계 결과 조회 포트 인터페이스

Commission Engine이 읽기 전용으로 의존하는 집계 결과 제공자의 추상 인터페이스입니다.
TransactionAggregator가 기본 구현체이며, 테스트에서는 Mock으로 대체할 수 있습니다.
"""

from abc import ABC, abstractmethod

from commission_report.domain.models.transaction import AccountAggregate, Transaction


class AggregateView(ABC):
    """
    집계 결과 조회 포트 인터페이스

    Implementation Requirements:
        1. get_aggregates()는 호출 시점의 계정별 합계 스냅샷을 반환해야 함 (순서 무관)
        2. get_global_maximum()은 금액이 0보다 큰 거래가 없으면 EMPTY_TRANSACTION을 반환해야 함
        3. transaction_count는 해석에 성공한 레코드 수만 세야 함
    """

    @abstractmethod
    def get_aggregates(self) -> list[AccountAggregate]:
        """
        계정별 누적 합계 스냅샷

        Returns:
            AccountAggregate 리스트. 순서는 보장되지 않으므로
            결정적인 순서가 필요하면 호출자가 정렬해야 합니다.
        """
        pass

    @abstractmethod
    def get_global_maximum(self) -> Transaction:
        """
        전체 데이터셋에서 금액이 가장 큰 거래

        Returns:
            최대 거래 (동일 금액이면 먼저 등장한 거래), 금액이 0보다 큰 거래가 없으면 EMPTY_TRANSACTION
        """
        pass

    @property
    @abstractmethod
    def transaction_count(self) -> int:
        """해석에 성공하여 집계된 레코드 수"""
        pass
