"""
커미션 리포트 CLI

사용법:
    commission-report report transactions.csv
    commission-report report transactions.csv --format json --rate 0.05
    commission-report generate 50 --output large_transactions.csv --seed 42

리포트는 표준 출력으로, 로그와 에러 메시지는 표준 에러로 출력됩니다.
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from commission_report.application.use_cases.generate_commission_report import (
    generate_commission_report,
)
from commission_report.domain.exceptions import CommissionReportException
from commission_report.infrastructure.config.report_settings import (
    DEFAULT_DELIMITER,
    DEFAULT_ENCODING,
    create_report_config,
)
from commission_report.infrastructure.generator.transaction_file_generator import (
    DEFAULT_ACCOUNT_COUNT,
    generate_transaction_file,
)
from commission_report.infrastructure.reporting.report_formatter import format_report

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

EXIT_OK = 0
EXIT_FAILURE = 1


def configure_logging(level: str) -> None:
    """로깅 설정 (표준 에러 출력)"""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="commission-report",
        description="Calculate per-account commissions from a transaction log.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    report = subparsers.add_parser("report", help="Print commissions for a transaction file")
    report.add_argument("file", help="The path to the CSV file containing transaction data.")
    report.add_argument("--format", dest="output_format", default="text", choices=["text", "json"])
    report.add_argument("--rate", type=float, default=None, help="Commission rate (default: 0.10)")
    report.add_argument(
        "--keep-highest",
        action="store_true",
        help="Do not remove the highest transaction before calculating commissions",
    )
    report.add_argument("--delimiter", default=DEFAULT_DELIMITER)
    report.add_argument("--encoding", default=DEFAULT_ENCODING)
    report.set_defaults(handler=run_report)

    generate = subparsers.add_parser("generate", help="Generate a synthetic transaction file")
    generate.add_argument("size_mb", type=int, help="Approximate file size in MB")
    generate.add_argument("--output", default="large_transactions.csv")
    generate.add_argument("--accounts", type=int, default=DEFAULT_ACCOUNT_COUNT)
    generate.add_argument("--seed", type=int, default=None)
    generate.set_defaults(handler=run_generate)

    return parser


def run_report(args: argparse.Namespace) -> int:
    config = create_report_config(
        commission_rate=args.rate,
        delimiter=args.delimiter,
        keep_highest=args.keep_highest,
        encoding=args.encoding,
        output_format=args.output_format,
    )
    report = generate_commission_report(args.file, config)
    print(format_report(report, config.output_format, config.decimal_places))
    return EXIT_OK


def run_generate(args: argparse.Namespace) -> int:
    count = generate_transaction_file(args.output, args.size_mb, accounts=args.accounts, seed=args.seed)
    print(f"File '{args.output}' generated with {count} transactions (~{args.size_mb} MB).")
    return EXIT_OK


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    CLI 진입점

    Returns:
        종료 코드 (성공 0, 도메인 오류 1, 인자 오류는 argparse가 2로 종료)
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    try:
        return args.handler(args)
    except CommissionReportException as e:
        logger.error(f"{args.command} failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())
