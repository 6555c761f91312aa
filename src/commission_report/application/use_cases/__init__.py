from commission_report.application.use_cases.generate_commission_report import (
    generate_commission_report,
)

__all__ = ["generate_commission_report"]
