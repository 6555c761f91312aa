"""
거래 도메인 모델

거래 로그의 한 레코드(Transaction)와 계정별 누적 합계(AccountAggregate)를 표현하는
불변 도메인 모델입니다.
"""

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Transaction:
    """
    거래 한 건을 나타내는 불변 객체

    파서가 라인 하나를 해석할 때마다 생성되며, Aggregator가 즉시 소비합니다.
    전역 최대 거래를 제외하면 fold 단계 이후로 보관되지 않습니다.

    Attributes:
        account_id: 계정 ID (구분자 사이의 원문 그대로)
        transaction_id: 거래 ID (구분자 사이의 원문 그대로)
        amount: 거래 금액

    Examples:
        >>> tx = Transaction(account_id="1", transaction_id="TX1", amount=100.0)
        >>> tx == Transaction("1", "TX1", 100.0)
        True
        >>> tx.is_empty
        False
    """

    account_id: str
    transaction_id: str
    amount: float

    @property
    def is_empty(self) -> bool:
        """
        빈 sentinel 거래인지 여부

        금액이 0보다 큰 거래가 집계되지 않았을 때 get_global_maximum()이 반환하는
        EMPTY_TRANSACTION과 구조적으로 동일하면 True입니다.

        Note:
            ",,0" 레코드는 sentinel과 구조적으로 같지만, 금액 0은 최대 거래를
            교체하지 못하므로 get_global_maximum()에서 둘이 혼동되지 않습니다.
        """
        return self == EMPTY_TRANSACTION

    def __str__(self) -> str:
        return (
            f"Transaction(account_id={self.account_id}, "
            f"transaction_id={self.transaction_id}, amount={self.amount:.2f})"
        )


EMPTY_TRANSACTION = Transaction(account_id="", transaction_id="", amount=0.0)


@dataclass(frozen=True)
class AccountAggregate:
    """
    계정별 누적 거래 금액

    Attributes:
        account_id: 계정 ID
        total_amount: 해당 계정으로 집계된 모든 거래 금액의 합
    """

    account_id: str
    total_amount: float

    def subtract(self, amount: float) -> "AccountAggregate":
        """
        금액을 뺀 새 AccountAggregate를 반환합니다.

        원본은 변경되지 않으므로 스냅샷 간 aliasing이 발생하지 않습니다.

        Args:
            amount: 뺄 금액

        Returns:
            total_amount가 조정된 새 인스턴스

        Examples:
            >>> AccountAggregate("2", 300.0).subtract(300.0)
            AccountAggregate(account_id='2', total_amount=0.0)
        """
        return replace(self, total_amount=self.total_amount - amount)
