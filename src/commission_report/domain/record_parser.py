"""
거래 레코드 파서

`accountId,transactionId,amount` 형식의 라인 하나를 Transaction으로 해석합니다.
해석할 수 없는 라인은 예외 없이 None(Skip)을 반환합니다.

이 모듈은 파이프라인의 hot loop입니다. 범용 split() 대신 str.find()로
처음 두 구분자의 위치만 찾아 필드를 잘라내며, 라인마다 필드 리스트를 만들지 않습니다.
"""

import math
from typing import Optional

from commission_report.domain.models.transaction import Transaction

DEFAULT_DELIMITER = ","


def parse_transaction(line: str, delimiter: str = DEFAULT_DELIMITER) -> Optional[Transaction]:
    """
    라인 하나를 Transaction으로 해석합니다.

    규칙:
        - 빈 라인, 공백만 있는 라인 -> Skip
        - 처음 두 구분자로 세 필드를 나눌 수 없으면 -> Skip
        - 세 번째 필드가 유한한 십진수가 아니면 -> Skip (소수점은 항상 '.')
        - 첫 번째, 두 번째 필드는 구분자 사이의 원문을 그대로 사용

    Args:
        line: 해석할 라인 (끝의 개행 문자는 없어도, 있어도 됨)
        delimiter: 필드 구분자 (기본값: ",")

    Returns:
        해석된 Transaction, Skip 대상이면 None

    Examples:
        >>> parse_transaction("1,TX1,100.0")
        Transaction(account_id='1', transaction_id='TX1', amount=100.0)
        >>> parse_transaction("1,TX1") is None
        True
        >>> parse_transaction("1,TX1,abc") is None
        True
    """
    if not line or line.isspace():
        return None

    first = line.find(delimiter)
    if first < 0:
        return None

    second = line.find(delimiter, first + 1)
    if second < 0:
        return None

    # 두 번째 구분자 뒤는 전부 금액 필드. 구분자가 더 있으면 숫자 해석에서 걸러진다.
    amount = parse_amount(line[second + 1:])
    if amount is None:
        return None

    return Transaction(
        account_id=line[:first],
        transaction_id=line[first + 1:second],
        amount=amount,
    )


def parse_amount(field: str) -> Optional[float]:
    """
    금액 필드를 로케일과 무관하게 float로 해석합니다.

    float()는 앞뒤 공백을 허용하고 항상 '.'을 소수점으로 사용합니다.
    nan/inf, 밑줄 자릿수 구분자("1_000"), ASCII가 아닌 숫자(아라비아-인도 숫자, 전각 숫자 등)는 거부합니다.

    Args:
        field: 금액 필드 문자열

    Returns:
        유한한 금액, 해석할 수 없으면 None
    """
    if "_" in field or not field.isascii():
        return None

    try:
        value = float(field)
    except ValueError:
        return None

    if not math.isfinite(value):
        return None
    return value


class RecordParser:
    """
    건너뛴 라인 수를 집계하는 파서

    parse_transaction()을 감싸고, 진단용으로 해석 성공/실패 건수를 기록합니다.
    Skip은 여전히 조용히 처리되며 예외는 발생하지 않습니다.

    Attributes:
        delimiter: 필드 구분자
        parsed_count: 해석에 성공한 라인 수
        skipped_count: 건너뛴 라인 수 (빈 라인 포함)
    """

    def __init__(self, delimiter: str = DEFAULT_DELIMITER) -> None:
        self.delimiter = delimiter
        self.parsed_count = 0
        self.skipped_count = 0

    def parse(self, line: str) -> Optional[Transaction]:
        transaction = parse_transaction(line, self.delimiter)
        if transaction is None:
            self.skipped_count += 1
        else:
            self.parsed_count += 1
        return transaction
