"""
레코드 파서 벤치마크

str.find() 기반 parse_transaction()과 단순 split() 기반 파서의
처리 시간을 같은 생성 파일에서 비교합니다.

실행:
    python examples/benchmark_parser.py [size_mb]
"""

import logging
import sys
import tempfile
import timeit
from pathlib import Path
from typing import Optional

from commission_report.domain.models.transaction import Transaction
from commission_report.domain.record_parser import parse_amount, parse_transaction
from commission_report.infrastructure.generator.transaction_file_generator import (
    generate_transaction_file,
)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

REPEAT = 3


def split_parse(line: str) -> Optional[Transaction]:
    """비교 대상: 라인마다 필드 리스트를 만드는 파서"""
    parts = line.split(",")
    if len(parts) != 3:
        return None
    amount = parse_amount(parts[2])
    if amount is None:
        return None
    return Transaction(parts[0], parts[1], amount)


def run_parser(lines: list[str], parser) -> int:
    parsed = 0
    for line in lines:
        if parser(line) is not None:
            parsed += 1
    return parsed


def main(size_mb: int = 10) -> None:
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "benchmark_transactions.csv"
        count = generate_transaction_file(path, size_mb, seed=42)

        # 디스크 I/O를 제외하고 파싱만 측정
        with open(path, encoding="utf-8") as f:
            lines = [line.rstrip("\n") for line in f]

    logger.info(f"Benchmarking {count} records ({size_mb} MB), best of {REPEAT}")

    results = {}
    for name, parser in (("find", parse_transaction), ("split", split_parse)):
        parsed = run_parser(lines, parser)
        elapsed = min(timeit.repeat(lambda: run_parser(lines, parser), number=1, repeat=REPEAT))
        results[name] = elapsed
        logger.info(f"{name:>5}: {elapsed:.3f}s ({parsed} parsed, {count / elapsed:,.0f} records/s)")

    logger.info(f"find / split ratio: {results['find'] / results['split']:.2f}")


if __name__ == "__main__":
    main(int(sys.argv[1]) if len(sys.argv) > 1 else 10)
