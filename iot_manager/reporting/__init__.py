"""Reporting module - command output formatting."""

from .json_reporter import JsonReporter

__all__ = ["JsonReporter"]
