"""
거래 파일 생성기 테스트
"""

import re

import pytest

from commission_report.application.services.transaction_aggregator import TransactionAggregator
from commission_report.domain.exceptions import InvalidConfigurationError
from commission_report.infrastructure.generator.transaction_file_generator import (
    BYTES_PER_MB,
    MAX_AMOUNT,
    generate_transaction_file,
)
from commission_report.infrastructure.sources import FileLineSource

LINE_PATTERN = re.compile(r"^\d+,TX\d{7},\d+\.\d{1,2}$")


class TestGenerateTransactionFile:
    """generate_transaction_file 테스트"""

    def test_file_reaches_target_size(self, tmp_path) -> None:
        """
        GIVEN: 목표 크기 1MB
        WHEN: 파일을 생성할 때
        THEN: 파일 크기가 1MB 이상이고, 마지막 한 줄 길이 이내로만 초과해야 함
        """
        # GIVEN
        path = tmp_path / "large_transactions.csv"

        # WHEN
        count = generate_transaction_file(path, 1, seed=7)

        # THEN
        size = path.stat().st_size
        assert size >= BYTES_PER_MB
        assert size < BYTES_PER_MB + 64
        assert count > 0

    def test_records_are_parseable(self, tmp_path) -> None:
        """
        GIVEN: 생성된 파일
        WHEN: TransactionAggregator로 집계할 때
        THEN: 모든 라인이 해석되어야 하고 건너뛴 라인이 없어야 함
        """
        # GIVEN
        path = tmp_path / "transactions.csv"
        count = generate_transaction_file(path, 1, accounts=5, seed=42)

        # WHEN
        aggregator = TransactionAggregator(FileLineSource(path))

        # THEN
        assert aggregator.transaction_count == count
        assert aggregator.skipped_count == 0
        assert {a.account_id for a in aggregator.get_aggregates()} <= {"1", "2", "3", "4", "5"}
        assert 0 <= aggregator.get_global_maximum().amount < MAX_AMOUNT

    def test_line_format(self, tmp_path) -> None:
        path = tmp_path / "transactions.csv"
        generate_transaction_file(path, 1, seed=1)

        with open(path, encoding="utf-8") as f:
            first_lines = [next(f).rstrip("\n") for _ in range(100)]

        assert all(LINE_PATTERN.match(line) for line in first_lines)
        assert first_lines[0].split(",")[1] == "TX0000001"
        assert first_lines[99].split(",")[1] == "TX0000100"

    def test_seed_makes_output_reproducible(self, tmp_path) -> None:
        first = tmp_path / "first.csv"
        second = tmp_path / "second.csv"

        generate_transaction_file(first, 1, seed=123)
        generate_transaction_file(second, 1, seed=123)

        assert first.read_bytes() == second.read_bytes()

    @pytest.mark.parametrize("size_mb, accounts", [(0, 10), (-1, 10), (1, 0)])
    def test_invalid_arguments(self, tmp_path, size_mb: int, accounts: int) -> None:
        with pytest.raises(InvalidConfigurationError):
            generate_transaction_file(tmp_path / "x.csv", size_mb, accounts=accounts)

        assert not (tmp_path / "x.csv").exists()
