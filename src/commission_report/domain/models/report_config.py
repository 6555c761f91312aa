"""
커미션 리포트 설정 모델

리포트 생성에 필요한 설정(커미션 비율, 구분자, 출력 형식 등)을 담는 불변 도메인 모델입니다.
"""

import codecs
import math
from dataclasses import dataclass

from commission_report.domain.exceptions import InvalidConfigurationError

SUPPORTED_OUTPUT_FORMATS = frozenset({"text", "json"})

# 계정 합계의 10%
DEFAULT_COMMISSION_RATE = 0.10


@dataclass(frozen=True)
class ReportConfig:
    """
    커미션 리포트 생성을 위한 설정을 담는 불변 객체입니다.

    Attributes:
        commission_rate: 계정 합계에 곱할 커미션 비율 (0 이상 1 이하).
        delimiter: 레코드 필드 구분자 (한 글자).
        remove_highest: 전체 데이터셋의 최대 거래 한 건을 제외할지 여부.
        decimal_places: 리포트 출력 시 소수점 자릿수.
        encoding: 입력 파일 인코딩.
        output_format: 리포트 출력 형식 ("text" 또는 "json").
    """

    commission_rate: float = DEFAULT_COMMISSION_RATE
    delimiter: str = ","
    remove_highest: bool = True
    decimal_places: int = 2
    encoding: str = "utf-8"
    output_format: str = "text"

    def __post_init__(self) -> None:
        """객체 생성 후 출력 형식을 정규화하고 검증합니다."""
        object.__setattr__(self, "output_format", self.output_format.lower())

        self.validate()

    def validate(self) -> None:
        """
        설정 값의 유효성을 검사합니다.

        Raises:
            InvalidConfigurationError: 설정이 유효하지 않을 경우 발생합니다.
        """
        errors = []

        if not isinstance(self.commission_rate, (int, float)) or not math.isfinite(self.commission_rate):
            errors.append(f"commission_rate must be a finite number, got {self.commission_rate!r}")
        elif not 0 <= self.commission_rate <= 1:
            errors.append(f"commission_rate must be between 0 and 1, got {self.commission_rate}")

        if not isinstance(self.delimiter, str) or len(self.delimiter) != 1:
            errors.append(f"delimiter must be a single character, got {self.delimiter!r}")
        elif self.delimiter in ".-+0123456789" or self.delimiter.isspace():
            errors.append(f"delimiter cannot be part of a decimal number: {self.delimiter!r}")

        if not isinstance(self.decimal_places, int) or isinstance(self.decimal_places, bool):
            errors.append(f"decimal_places must be an integer, got {self.decimal_places!r}")
        elif self.decimal_places < 0:
            errors.append("decimal_places cannot be negative.")

        if not self._is_known_encoding(self.encoding):
            errors.append(f"Unknown encoding: {self.encoding}")

        if self.output_format not in SUPPORTED_OUTPUT_FORMATS:
            errors.append(
                f"output_format must be one of {sorted(SUPPORTED_OUTPUT_FORMATS)}, "
                f"got {self.output_format!r}"
            )

        if errors:
            raise InvalidConfigurationError(
                f"ReportConfig validation failed: {'; '.join(errors)}"
            )

    def _is_known_encoding(self, encoding: str) -> bool:
        try:
            codecs.lookup(encoding)
            return True
        except LookupError:
            return False

    def __str__(self) -> str:
        return (
            f"ReportConfig(commission_rate={self.commission_rate}, "
            f"delimiter={self.delimiter!r}, remove_highest={self.remove_highest}, "
            f"output_format={self.output_format})"
        )
