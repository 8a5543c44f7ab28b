"""Git Log Analyzer - contributor and keyword reports from git history."""

__version__ = "0.1.0"
