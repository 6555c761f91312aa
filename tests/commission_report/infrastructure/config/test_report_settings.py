"""
create_report_config 팩토리 테스트
"""

import pytest

from commission_report.domain.exceptions import InvalidConfigurationError
from commission_report.infrastructure.config.report_settings import (
    DEFAULT_COMMISSION_RATE,
    create_report_config,
)


class TestCreateReportConfig:
    """ReportConfig 팩토리 테스트"""

    def test_defaults(self) -> None:
        """
        GIVEN: 인자 없이 호출
        WHEN: create_report_config()를 실행할 때
        THEN: 기본 커미션 비율과 최대 거래 제외가 적용되어야 함
        """
        config = create_report_config()

        assert config.commission_rate == DEFAULT_COMMISSION_RATE == 0.10
        assert config.remove_highest is True
        assert config.output_format == "text"

    def test_keep_highest_disables_removal(self) -> None:
        assert create_report_config(keep_highest=True).remove_highest is False

    def test_explicit_zero_rate_is_kept(self) -> None:
        """
        GIVEN: commission_rate=0
        WHEN: 설정을 생성할 때
        THEN: 기본값으로 대체되지 않아야 함
        """
        assert create_report_config(commission_rate=0.0).commission_rate == 0.0

    def test_overrides(self) -> None:
        config = create_report_config(
            commission_rate=0.2, delimiter=";", encoding="latin-1", output_format="json"
        )

        assert config.commission_rate == 0.2
        assert config.delimiter == ";"
        assert config.encoding == "latin-1"
        assert config.output_format == "json"

    def test_invalid_values_are_rejected(self) -> None:
        with pytest.raises(InvalidConfigurationError):
            create_report_config(commission_rate=3.0)
