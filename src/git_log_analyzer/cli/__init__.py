"""Command-line interface for Git Log Analyzer."""
