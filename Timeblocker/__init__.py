"""Timeblocker: schedule Markdown task lines from informal time expressions."""

__version__ = "0.1.0"
