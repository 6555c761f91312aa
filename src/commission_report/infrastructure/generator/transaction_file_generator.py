"""
테스트용 거래 파일 생성기

원하는 크기(MB)에 도달할 때까지 `accountId,TX0000001,1234.56` 형식의 레코드를 기록합니다.
대용량 입력에서 집계 파이프라인의 성능을 확인할 때 사용합니다.
"""

import logging
import random
from pathlib import Path
from typing import Optional

from commission_report.domain.exceptions import InvalidConfigurationError

logger = logging.getLogger(__name__)

BYTES_PER_MB = 1024 * 1024
DEFAULT_ACCOUNT_COUNT = 100
MAX_AMOUNT = 10_000


def generate_transaction_file(
    path: str | Path,
    size_mb: int,
    accounts: int = DEFAULT_ACCOUNT_COUNT,
    seed: Optional[int] = None,
) -> int:
    """
    거래 파일을 생성합니다.

    계정 ID는 1~accounts 사이의 난수, 거래 ID는 7자리 일련번호(TX0000001),
    금액은 [0, 10000) 구간의 난수를 소수점 두 자리로 반올림한 값입니다.
    기록한 바이트 수(UTF-8, 개행 포함)가 목표 크기에 도달하면 멈춥니다.

    Args:
        path: 생성할 파일 경로 (이미 있으면 덮어씀)
        size_mb: 목표 파일 크기 (MB, 1 이상)
        accounts: 계정 수 (1 이상)
        seed: 난수 시드 (재현 가능한 파일이 필요할 때)

    Returns:
        기록한 레코드 수

    Raises:
        InvalidConfigurationError: size_mb 또는 accounts가 1 미만인 경우
    """
    if size_mb < 1:
        raise InvalidConfigurationError(f"size_mb must be at least 1, got {size_mb}")
    if accounts < 1:
        raise InvalidConfigurationError(f"accounts must be at least 1, got {accounts}")

    target_bytes = size_mb * BYTES_PER_MB
    rng = random.Random(seed)

    written_bytes = 0
    counter = 0
    next_progress = BYTES_PER_MB

    logger.info(f"Generating {size_mb} MB transaction file at {path}")

    with open(path, "w", encoding="utf-8", newline="\n") as f:
        while written_bytes < target_bytes:
            counter += 1
            account_id = rng.randint(1, accounts)
            amount = round(rng.random() * MAX_AMOUNT, 2)

            line = f"{account_id},TX{counter:07d},{amount}\n"
            f.write(line)
            # ASCII만 기록하므로 문자 수 == UTF-8 바이트 수
            written_bytes += len(line)

            if written_bytes >= next_progress:
                logger.debug(f"Written {written_bytes // BYTES_PER_MB} MB ({counter} records)")
                next_progress += BYTES_PER_MB

    logger.info(f"Generated {counter} transactions ({written_bytes} bytes) in {path}")
    return counter
