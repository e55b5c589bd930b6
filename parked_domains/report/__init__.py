# File: parked_domains/report/__init__.py
"""parked_domains.report: output sinks used by the CLI."""

from parked_domains.report.json_report import render_json

__all__ = ["render_json"]
