"""Reports — the streamed extraction report."""

from file_extractor.reports.report_writer import ReportWriter

__all__ = ["ReportWriter"]
