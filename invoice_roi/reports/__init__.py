from .generator import build_report, report_filename

__all__ = ["build_report", "report_filename"]
