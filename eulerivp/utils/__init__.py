"""Reporting helpers."""

from eulerivp.utils.report import format_table

__all__ = ["format_table"]
