"""
커미션 리포트 예외 정의

이 모듈은 거래 로그 수집, 집계, 커미션 계산 과정에서 발생할 수 있는 예외를 정의합니다.
모든 예외는 명확한 계층 구조를 가지며, 컨텍스트 정보를 포함하고
예외 체이닝(__cause__)을 지원합니다.

잘못된 형식의 레코드(필드 수 불일치, 숫자가 아닌 금액)는 예외가 아닙니다.
파서가 해당 라인을 조용히 건너뛰며, 건너뛴 라인 수만 진단용으로 집계됩니다.

예외 계층 구조:
    Exception
    └── CommissionReportException (기본 예외)
        ├── SourceException (라인 소스 관련)
        │   ├── SourceUnavailableError (파일 없음 / 파일이 아님)
        │   └── SourceReadError (읽기 중 I/O 또는 디코딩 실패)
        └── ValidationException (검증 실패)
            └── InvalidConfigurationError (잘못된 설정 값)
"""


class CommissionReportException(Exception):
    """
    커미션 리포트의 기본 예외 클래스

    모든 커미션 리포트 예외의 부모 클래스입니다.
    이 예외를 catch하면 파이프라인에서 발생하는 모든 치명적 오류를 처리할 수 있습니다.

    Attributes:
        message: 예외 메시지 (컨텍스트 정보 포함)

    Examples:
        >>> try:
        ...     raise CommissionReportException("Report generation failed for data.csv")
        ... except CommissionReportException as e:
        ...     print(f"Error: {e}")
        Error: Report generation failed for data.csv

        >>> # 예외 체이닝 사용
        >>> try:
        ...     raise OSError("Disk read error")
        ... except OSError as e:
        ...     raise CommissionReportException("Failed to read transactions", cause=e)
    """

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        """
        Args:
            message: 예외 메시지. 가능한 많은 컨텍스트 정보를 포함해야 합니다.
                    (예: "Transaction file not found: /data/transactions.csv")
            cause: 이 예외를 발생시킨 원본 예외 (선택 사항)
        """
        self.message = message
        super().__init__(message)
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        """예외를 문자열로 표현"""
        if self.__cause__:
            return f"{self.message} (Caused by: {self.__cause__})"
        return self.message


class SourceException(CommissionReportException):
    """
    라인 소스 관련 예외

    파일이 존재하지 않거나, 읽는 도중 I/O 오류가 발생하는 등
    Aggregator에 라인을 공급하는 과정의 모든 치명적 오류를 나타냅니다.
    이 예외는 "거래 0건"으로 가려지지 않고 항상 호출자에게 전파됩니다.

    Examples:
        >>> exc = SourceException("Failed to read /data/transactions.csv at line 1042")
        >>> print(exc)
        Failed to read /data/transactions.csv at line 1042
    """

    pass


class SourceUnavailableError(SourceException):
    """라인 소스를 열 수 없음을 나타냅니다 (파일 없음, 디렉터리 등)."""

    pass


class SourceReadError(SourceException):
    """라인 소스를 읽는 도중 I/O 또는 디코딩 오류가 발생했음을 나타냅니다."""

    pass


class ValidationException(CommissionReportException):
    """
    데이터 검증 실패 예외

    잘못된 커미션 비율, 구분자, 생성 파일 크기 등
    비즈니스 규칙 위반이나 설정 검증 실패를 나타냅니다.

    Examples:
        >>> errors = [
        ...     "commission_rate must be between 0 and 1",
        ...     "delimiter must be a single character",
        ... ]
        >>> exc = ValidationException(f"Validation failed: {'; '.join(errors)}")
    """

    pass


class InvalidConfigurationError(ValidationException):
    """잘못된 설정 값을 나타냅니다."""

    pass
