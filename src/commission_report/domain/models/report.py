"""
커미션 리포트 결과 모델
"""

from dataclasses import dataclass, field
from typing import Optional

from commission_report.domain.models.transaction import Transaction


@dataclass(frozen=True)
class CommissionReport:
    """
    리포트 생성 결과

    Attributes:
        commissions: 계정 ID -> 커미션 (순서 없음, 출력 시 정렬)
        transaction_count: 집계된 레코드 수
        skipped_count: 빈 라인 또는 잘못된 형식으로 건너뛴 라인 수
        highest_transaction: 전체 최대 거래, 거래가 없으면 None
        highest_removed: 최대 거래가 합계에서 제외되었는지 여부
    """

    commissions: dict[str, float] = field(default_factory=dict)
    transaction_count: int = 0
    skipped_count: int = 0
    highest_transaction: Optional[Transaction] = None
    highest_removed: bool = False

    @property
    def commission_count(self) -> int:
        return len(self.commissions)

    def sorted_commissions(self) -> list[tuple[str, float]]:
        """계정 ID 순(문자열 서수 비교)으로 정렬된 (계정 ID, 커미션) 목록"""
        return sorted(self.commissions.items())
