"""Core parsing, analysis and reporting for Git Log Analyzer."""
