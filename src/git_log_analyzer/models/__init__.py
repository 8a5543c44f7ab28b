"""Data models for Git Log Analyzer."""

from .commit import Commit
from .report import AuthorCount, KeywordMatch, Report

__all__ = ["AuthorCount", "Commit", "KeywordMatch", "Report"]
