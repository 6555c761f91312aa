"""
커미션 리포트 생성 유즈케이스

거래 로그를 한 번 읽어 집계하고, 최대 거래를 제외한 뒤 계정별 커미션을 계산하는
전체 파이프라인을 관리합니다.
"""

import logging
from pathlib import Path
from typing import Optional

from commission_report.application.services.commission_engine import CommissionEngine
from commission_report.application.services.transaction_aggregator import TransactionAggregator
from commission_report.domain.models.report import CommissionReport
from commission_report.domain.models.report_config import ReportConfig
from commission_report.domain.ports.line_source import LineSource
from commission_report.infrastructure.sources.file_line_source import FileLineSource

logger = logging.getLogger(__name__)


def generate_commission_report(
    source: LineSource | str | Path,
    config: Optional[ReportConfig] = None,
) -> CommissionReport:
    """
    커미션 리포트 생성 유즈케이스

    1. 라인 소스를 끝까지 읽어 계정별 합계와 최대 거래를 집계
    2. 설정에 따라 최대 거래를 해당 계정 합계에서 제외
    3. 계정별 커미션 계산

    Args:
        source: LineSource 또는 거래 파일 경로
        config: 리포트 설정 (기본값: ReportConfig())

    Returns:
        CommissionReport 결과 객체

    Raises:
        SourceUnavailableError: 파일이 없거나 열 수 없는 경우
        SourceReadError: 읽는 도중 오류가 발생한 경우

    Examples:
        >>> report = generate_commission_report("transactions.csv")
        >>> report.commissions
        {'1': 30.0, '2': 0.0}
    """
    config = config or ReportConfig()

    # 1. 소스 생성
    if not isinstance(source, LineSource):
        source = FileLineSource(source, encoding=config.encoding)

    logger.info(f"Generating commission report for {source.describe()} with {config}")

    # 2. 집계 (생성자에서 소스를 끝까지 읽음)
    aggregator = TransactionAggregator(source, delimiter=config.delimiter)

    # 3. 최대 거래 제외 및 커미션 계산
    engine = CommissionEngine(aggregator, commission_rate=config.commission_rate)
    if config.remove_highest:
        engine.remove_highest_transaction()

    commissions = engine.calculate_commissions()

    maximum = aggregator.get_global_maximum()
    report = CommissionReport(
        commissions=commissions,
        transaction_count=aggregator.transaction_count,
        skipped_count=aggregator.skipped_count,
        highest_transaction=None if maximum.is_empty else maximum,
        highest_removed=engine.highest_removed,
    )

    logger.info(
        f"{report.commission_count} commissions calculated from "
        f"{report.transaction_count} transactions"
    )
    return report
