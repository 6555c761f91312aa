"""Application Layer Package"""

from commission_report.application.services import CommissionEngine, TransactionAggregator
from commission_report.application.use_cases import generate_commission_report

__all__ = [
    "CommissionEngine",
    "TransactionAggregator",
    "generate_commission_report",
]
