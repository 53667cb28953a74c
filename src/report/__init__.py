"""Text and JSON rendering of eligibility decisions."""

from src.report.render import decision_to_dict, format_brl, render_report

__all__ = ["decision_to_dict", "format_brl", "render_report"]
