"""Line Source Adapters"""

from commission_report.infrastructure.sources.file_line_source import FileLineSource
from commission_report.infrastructure.sources.iterable_line_source import IterableLineSource

__all__ = [
    "FileLineSource",
    "IterableLineSource",
]
