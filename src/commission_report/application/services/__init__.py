from commission_report.application.services.commission_engine import CommissionEngine
from commission_report.application.services.transaction_aggregator import TransactionAggregator

__all__ = ["CommissionEngine", "TransactionAggregator"]
