"""
ReportConfig 리포트 설정 테스트

커미션 비율, 구분자, 출력 형식 등의 설정 검증 규칙을 확인합니다.
"""

import dataclasses

import pytest

from commission_report.domain.exceptions import InvalidConfigurationError, ValidationException
from commission_report.domain.models.report_config import ReportConfig


class TestReportConfigDefaults:
    """ReportConfig 기본값 테스트"""

    def test_default_values(self) -> None:
        """
        GIVEN: 인자 없이 생성한 ReportConfig
        WHEN: 필드를 확인할 때
        THEN: 운영 기본값이어야 함
        """
        config = ReportConfig()

        assert config.commission_rate == 0.10
        assert config.delimiter == ","
        assert config.remove_highest is True
        assert config.decimal_places == 2
        assert config.encoding == "utf-8"
        assert config.output_format == "text"

    def test_config_is_immutable(self) -> None:
        config = ReportConfig()

        with pytest.raises(dataclasses.FrozenInstanceError):
            config.commission_rate = 0.2  # type: ignore[misc]

    def test_output_format_is_normalized(self) -> None:
        """
        GIVEN: 대문자로 입력된 출력 형식
        WHEN: ReportConfig를 생성할 때
        THEN: 소문자로 정규화되어야 함
        """
        assert ReportConfig(output_format="JSON").output_format == "json"


class TestReportConfigValidation:
    """ReportConfig 검증 로직 테스트"""

    @pytest.mark.parametrize("rate", [-0.01, 1.5, float("nan"), float("inf")])
    def test_invalid_commission_rate(self, rate: float) -> None:
        """
        GIVEN: 0~1 범위를 벗어나거나 유한하지 않은 커미션 비율
        WHEN: ReportConfig를 생성할 때
        THEN: InvalidConfigurationError가 발생해야 함
        """
        with pytest.raises(InvalidConfigurationError) as exc_info:
            ReportConfig(commission_rate=rate)

        assert "commission_rate" in str(exc_info.value)

    @pytest.mark.parametrize("rate", [0, 0.0, 0.05, 1.0])
    def test_boundary_commission_rates_are_valid(self, rate: float) -> None:
        assert ReportConfig(commission_rate=rate).commission_rate == rate

    @pytest.mark.parametrize("delimiter", ["", ",,", ".", "5", " ", "\t"])
    def test_invalid_delimiter(self, delimiter: str) -> None:
        """
        GIVEN: 한 글자가 아니거나 숫자/공백과 충돌하는 구분자
        WHEN: ReportConfig를 생성할 때
        THEN: InvalidConfigurationError가 발생해야 함
        """
        with pytest.raises(InvalidConfigurationError) as exc_info:
            ReportConfig(delimiter=delimiter)

        assert "delimiter" in str(exc_info.value)

    def test_alternative_delimiter_is_valid(self) -> None:
        assert ReportConfig(delimiter=";").delimiter == ";"

    def test_negative_decimal_places(self) -> None:
        with pytest.raises(InvalidConfigurationError):
            ReportConfig(decimal_places=-1)

    @pytest.mark.parametrize("decimal_places", [2.5, "2", None, True])
    def test_non_integer_decimal_places(self, decimal_places) -> None:
        """
        GIVEN: 정수가 아닌 decimal_places
        WHEN: ReportConfig를 생성할 때
        THEN: 포맷 단계가 아니라 생성 시점에 InvalidConfigurationError가 발생해야 함
        """
        with pytest.raises(InvalidConfigurationError) as exc_info:
            ReportConfig(decimal_places=decimal_places)

        assert "decimal_places must be an integer" in str(exc_info.value)

    def test_unknown_encoding(self) -> None:
        with pytest.raises(InvalidConfigurationError) as exc_info:
            ReportConfig(encoding="not-a-real-encoding")

        assert "not-a-real-encoding" in str(exc_info.value)

    def test_unknown_output_format(self) -> None:
        with pytest.raises(InvalidConfigurationError) as exc_info:
            ReportConfig(output_format="xml")

        assert "output_format" in str(exc_info.value)

    def test_multiple_errors_are_reported_together(self) -> None:
        """
        GIVEN: 여러 필드가 잘못된 설정
        WHEN: ReportConfig를 생성할 때
        THEN: 모든 오류가 하나의 메시지에 포함되어야 함
        """
        with pytest.raises(ValidationException) as exc_info:
            ReportConfig(commission_rate=2.0, delimiter="", output_format="xml")

        message = str(exc_info.value)
        assert "commission_rate" in message
        assert "delimiter" in message
        assert "output_format" in message
