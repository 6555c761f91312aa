"""
커미션 계산 서비스

집계 결과(AggregateView)를 읽어 최대 거래를 제외하고 계정별 커미션을 계산합니다.
"""

import logging
import math
from typing import Optional

from commission_report.domain.exceptions import InvalidConfigurationError
from commission_report.domain.models.report_config import DEFAULT_COMMISSION_RATE
from commission_report.domain.models.transaction import AccountAggregate
from commission_report.domain.ports.aggregate_view import AggregateView

logger = logging.getLogger(__name__)


class CommissionEngine:
    """
    커미션 계산 서비스 (Processor)

    AggregateView의 계정별 합계를 처음 사용할 때 한 번만 스냅샷으로 가져와 캐시합니다.
    remove_highest_transaction()과 calculate_commissions()는 같은 스냅샷 위에서 동작하므로
    호출 순서에 따라 결과가 달라집니다.

    최대 거래 제외는 멱등입니다. 두 번째 호출부터는 이미 조정된 스냅샷을 그대로 반환하며
    금액을 다시 빼지 않습니다.

    Attributes:
        _view: 읽기 전용 집계 결과 제공자
        _commission_rate: 커미션 비율
        _snapshot: 캐시된 계정별 합계 (None이면 아직 계산되지 않음)
        _highest_removed: 최대 거래 제외가 적용되었는지 여부
    """

    def __init__(self, view: AggregateView, commission_rate: float = DEFAULT_COMMISSION_RATE) -> None:
        """
        Args:
            view: 집계 결과 제공자 (보통 TransactionAggregator)
            commission_rate: 커미션 비율 (기본값: 0.10)

        Raises:
            InvalidConfigurationError: commission_rate가 0~1 범위의 유한한 수가 아닌 경우
        """
        if not math.isfinite(commission_rate) or not 0 <= commission_rate <= 1:
            raise InvalidConfigurationError(
                f"commission_rate must be a finite number between 0 and 1, got {commission_rate}"
            )

        self._view = view
        self._commission_rate = commission_rate
        self._snapshot: Optional[list[AccountAggregate]] = None
        self._highest_removed = False

    @property
    def commission_rate(self) -> float:
        return self._commission_rate

    @property
    def highest_removed(self) -> bool:
        return self._highest_removed

    def _get_snapshot(self) -> list[AccountAggregate]:
        if self._snapshot is None:
            self._snapshot = list(self._view.get_aggregates())
            logger.debug(f"Snapshotted {len(self._snapshot)} account aggregates")
        return self._snapshot

    def remove_highest_transaction(self) -> list[AccountAggregate]:
        """
        전체 최대 거래를 해당 계정의 합계에서 제외

        최대 거래를 소유한 계정의 합계만 새 AccountAggregate로 교체하고,
        나머지 계정은 그대로 둡니다. 거래가 한 건도 없었다면(EMPTY_TRANSACTION) 아무것도 하지 않습니다.

        Returns:
            조정된 전체 스냅샷 (캐시된 리스트의 복사본)

        Examples:
            >>> engine = CommissionEngine(aggregator)
            >>> engine.remove_highest_transaction()
            [AccountAggregate(account_id='1', total_amount=300.0), AccountAggregate(account_id='2', total_amount=0.0)]
        """
        snapshot = self._get_snapshot()

        if self._highest_removed:
            logger.debug("Highest transaction already removed, returning adjusted snapshot")
            return list(snapshot)

        maximum = self._view.get_global_maximum()
        if maximum.is_empty:
            logger.info("No transactions aggregated, nothing to remove")
        else:
            for index, aggregate in enumerate(snapshot):
                if aggregate.account_id == maximum.account_id:
                    snapshot[index] = aggregate.subtract(maximum.amount)
                    logger.info(
                        f"Removed highest transaction {maximum.transaction_id} "
                        f"({maximum.amount:.2f}) from account {maximum.account_id}"
                    )
                    break
            else:
                logger.warning(
                    f"Account {maximum.account_id} of highest transaction "
                    f"{maximum.transaction_id} not found in aggregates"
                )

        self._highest_removed = True
        return list(snapshot)

    def calculate_commissions(self) -> dict[str, float]:
        """
        계정별 커미션 계산

        커미션 = total_amount * commission_rate. remove_highest_transaction()이 먼저 호출되었다면
        조정된 합계를, 아니라면 원래 합계를 사용합니다.

        Returns:
            계정 ID -> 커미션 매핑 (순서 보장 없음). 거래가 없으면 빈 딕셔너리.
        """
        commissions = {
            aggregate.account_id: aggregate.total_amount * self._commission_rate
            for aggregate in self._get_snapshot()
        }
        logger.debug(f"Calculated {len(commissions)} commissions")
        return commissions
