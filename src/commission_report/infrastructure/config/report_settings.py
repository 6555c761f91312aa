"""
커미션 리포트 설정 팩토리

CLI 인자로부터 ReportConfig를 생성하는 헬퍼 함수를 제공합니다.
운영 기본값(커미션 10%, 쉼표 구분자, 소수점 두 자리 등)을 한곳에서 관리합니다.
"""

from typing import Optional

from commission_report.domain.models.report_config import DEFAULT_COMMISSION_RATE, ReportConfig
from commission_report.domain.record_parser import DEFAULT_DELIMITER


# 입력 파일 인코딩 (구분자 기본값은 record_parser.DEFAULT_DELIMITER)
DEFAULT_ENCODING = "utf-8"

# 리포트 출력 설정
DEFAULT_DECIMAL_PLACES = 2
DEFAULT_OUTPUT_FORMAT = "text"


def create_report_config(
    commission_rate: Optional[float] = None,
    delimiter: str = DEFAULT_DELIMITER,
    keep_highest: bool = False,
    encoding: str = DEFAULT_ENCODING,
    output_format: str = DEFAULT_OUTPUT_FORMAT,
    decimal_places: int = DEFAULT_DECIMAL_PLACES,
) -> ReportConfig:
    """
    커미션 리포트 생성을 위한 ReportConfig를 생성합니다.

    Args:
        commission_rate: 커미션 비율. None이면 기본값 0.10.
        delimiter: 필드 구분자
        keep_highest: True면 최대 거래를 제외하지 않음
        encoding: 입력 파일 인코딩
        output_format: "text" 또는 "json"
        decimal_places: 출력 소수점 자릿수

    Returns:
        검증된 ReportConfig 객체

    Raises:
        InvalidConfigurationError: 설정 검증 실패 시

    Examples:
        >>> config = create_report_config()
        >>> config.commission_rate
        0.1
        >>> create_report_config(keep_highest=True).remove_highest
        False
    """
    return ReportConfig(
        commission_rate=DEFAULT_COMMISSION_RATE if commission_rate is None else commission_rate,
        delimiter=delimiter,
        remove_highest=not keep_highest,
        decimal_places=decimal_places,
        encoding=encoding,
        output_format=output_format,
    )
