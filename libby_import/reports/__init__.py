"""Report generation for Libby Import."""

from libby_import.reports.journey_report import JourneyReportGenerator, render

__all__ = ["JourneyReportGenerator", "render"]
