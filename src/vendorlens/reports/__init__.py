"""Report generators."""

from vendorlens.reports.html import HTMLReportGenerator

__all__ = ["HTMLReportGenerator"]
