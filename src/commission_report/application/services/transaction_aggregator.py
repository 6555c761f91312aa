"""
거래 집계 서비스

라인 소스를 정확히 한 번 읽으면서 계정별 누적 합계와 전체 최대 거래를 동시에 유지합니다.
최대 거래를 따로 보관하므로 "최대 거래 제외"를 두 번째 전체 순회나 정렬 없이
O(1) 조정으로 처리할 수 있습니다.
"""

import logging
from collections.abc import Iterable

from commission_report.domain.exceptions import SourceReadError
from commission_report.domain.models.transaction import (
    EMPTY_TRANSACTION,
    AccountAggregate,
    Transaction,
)
from commission_report.domain.ports.aggregate_view import AggregateView
from commission_report.domain.ports.line_source import LineSource
from commission_report.domain.record_parser import DEFAULT_DELIMITER, RecordParser

logger = logging.getLogger(__name__)


class TransactionAggregator(AggregateView):
    """
    거래 집계 서비스 (Storage)

    생성자에서 라인 소스를 끝까지 읽어 fold를 완료합니다.
    생성이 끝난 뒤에는 읽기 전용입니다.

    Fold 규칙:
        1. totals[account_id] += amount (처음 등장한 계정은 amount로 생성)
        2. amount가 현재 최대보다 엄격하게 크면 최대 거래를 교체
           (초기값은 금액 0인 EMPTY_TRANSACTION이므로 0 이하 거래는 최대가 되지 않음)
           (동일 금액이면 먼저 등장한 거래 유지)

    Attributes:
        _totals: 계정 ID -> 누적 금액 (삽입 순서 유지)
        _maximum: 지금까지의 최대 거래, 금액이 0보다 큰 거래가 없으면 EMPTY_TRANSACTION
        _parser: 해석 성공/실패 건수를 세는 RecordParser
        _source_name: 로그에 표시할 소스 이름
    """

    # 10만 건마다 진행 로그 출력
    PROGRESS_LOG_INTERVAL = 100_000

    def __init__(
        self,
        source: LineSource | Iterable[str],
        delimiter: str = DEFAULT_DELIMITER,
    ) -> None:
        """
        TransactionAggregator 초기화 및 집계

        Args:
            source: LineSource 또는 문자열 이터러블
            delimiter: 필드 구분자 (기본값: ",")

        Raises:
            SourceUnavailableError: LineSource를 열 수 없는 경우
            SourceReadError: 읽는 도중 I/O 또는 디코딩 오류가 발생한 경우
        """
        self._totals: dict[str, float] = {}
        self._maximum: Transaction = EMPTY_TRANSACTION
        self._parser = RecordParser(delimiter)

        if isinstance(source, LineSource):
            self._source_name = source.describe()
            lines = source.lines()
        else:
            self._source_name = type(source).__name__
            lines = source

        self._drain(lines)

    def _drain(self, lines: Iterable[str]) -> None:
        """
        라인을 끝까지 읽으며 fold

        잘못된 형식의 라인은 조용히 건너뜁니다. SourceException은 그대로 전파되고,
        일반 이터러블에서 올라온 OSError/UnicodeDecodeError는 SourceReadError로 변환됩니다.
        """
        logger.info(f"Aggregating transactions from {self._source_name}...")

        parser = self._parser
        try:
            for line in lines:
                transaction = parser.parse(line)
                if transaction is None:
                    continue

                self._fold(transaction)

                if parser.parsed_count % self.PROGRESS_LOG_INTERVAL == 0:
                    logger.debug(f"Aggregated {parser.parsed_count} transactions")

        except (OSError, UnicodeDecodeError) as e:
            raise SourceReadError(
                f"Failed to read transactions from {self._source_name}", cause=e
            ) from e

        logger.info(
            f"Aggregated {parser.parsed_count} transactions into "
            f"{len(self._totals)} accounts from {self._source_name}"
        )
        if parser.skipped_count:
            logger.warning(
                f"Skipped {parser.skipped_count} blank or malformed lines in {self._source_name}"
            )

    def _fold(self, transaction: Transaction) -> None:
        account_id = transaction.account_id
        amount = transaction.amount

        if account_id in self._totals:
            self._totals[account_id] += amount
        else:
            self._totals[account_id] = amount

        # 엄격한 '>' 비교: 동일 금액이면 먼저 등장한 거래 유지, 0 이하 금액은 sentinel을 넘지 못함
        if amount > self._maximum.amount:
            self._maximum = transaction

    def get_aggregates(self) -> list[AccountAggregate]:
        """
        계정별 누적 합계 스냅샷

        Returns:
            새로 생성된 AccountAggregate 리스트 (계정이 처음 등장한 순서)
        """
        return [
            AccountAggregate(account_id=account_id, total_amount=total)
            for account_id, total in self._totals.items()
        ]

    def get_global_maximum(self) -> Transaction:
        """최대 거래, 금액이 0보다 큰 거래가 없으면 EMPTY_TRANSACTION"""
        return self._maximum

    @property
    def transaction_count(self) -> int:
        return self._parser.parsed_count

    @property
    def skipped_count(self) -> int:
        """빈 라인 또는 잘못된 형식으로 건너뛴 라인 수"""
        return self._parser.skipped_count

    @property
    def account_count(self) -> int:
        return len(self._totals)

    def get_status(self) -> dict:
        """
        집계 상태 조회

        Returns:
            상태 정보 딕셔너리:
                - source: 소스 이름
                - transactions: 집계된 레코드 수
                - skipped: 건너뛴 라인 수
                - accounts: 계정 수
        """
        return {
            "source": self._source_name,
            "transactions": self.transaction_count,
            "skipped": self.skipped_count,
            "accounts": self.account_count,
        }
