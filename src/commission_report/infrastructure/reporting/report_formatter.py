"""
리포트 출력 포매터

CommissionReport를 콘솔용 텍스트 또는 JSON 문자열로 변환합니다.
두 형식 모두 계정 ID 순으로 정렬하고 소수점 자릿수를 고정합니다.
"""

from commission_report.domain.exceptions import InvalidConfigurationError
from commission_report.domain.models.report import CommissionReport
from commission_report.infrastructure.serialization.json_utils import json_dumps

TEXT_HEADER = "Commissions:"


def format_text(report: CommissionReport, decimal_places: int = 2) -> str:
    """
    텍스트 리포트

    형식:
        Commissions:
        1, 30.00
        2, 0.00
        2 commissions calculated. - 3 transactions read from file

    Args:
        report: 리포트 결과
        decimal_places: 소수점 자릿수

    Returns:
        개행으로 구분된 리포트 문자열 (마지막 개행 없음)
    """
    lines = [TEXT_HEADER]
    for account_id, commission in report.sorted_commissions():
        lines.append(f"{account_id}, {commission:.{decimal_places}f}")

    lines.append(
        f"{report.commission_count} commissions calculated. - "
        f"{report.transaction_count} transactions read from file"
    )
    return "\n".join(lines)


def format_json(report: CommissionReport, decimal_places: int = 2) -> str:
    """
    JSON 리포트

    Returns:
        commissions, commission_count, transaction_count, skipped_lines,
        highest_transaction, highest_removed 키를 가진 JSON 문자열
    """
    highest = report.highest_transaction
    payload = {
        "commissions": {
            account_id: round(commission, decimal_places)
            for account_id, commission in report.sorted_commissions()
        },
        "commission_count": report.commission_count,
        "transaction_count": report.transaction_count,
        "skipped_lines": report.skipped_count,
        "highest_transaction": None if highest is None else {
            "account_id": highest.account_id,
            "transaction_id": highest.transaction_id,
            "amount": highest.amount,
        },
        "highest_removed": report.highest_removed,
    }
    return json_dumps(payload, pretty=True)


def format_report(report: CommissionReport, output_format: str = "text", decimal_places: int = 2) -> str:
    """
    출력 형식에 맞는 포매터 선택

    Raises:
        InvalidConfigurationError: 지원하지 않는 출력 형식인 경우
    """
    if output_format == "text":
        return format_text(report, decimal_places)
    elif output_format == "json":
        return format_json(report, decimal_places)
    else:
        raise InvalidConfigurationError(f"Unknown output_format: {output_format}")
