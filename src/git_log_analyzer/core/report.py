"""Report rendering and persistence."""

import json
import os
import tempfile
from pathlib import Path
from typing import List

from git_log_analyzer.core.analyzer import GitLogAnalyzer
from git_log_analyzer.core.config import AnalyzerConfig, OutputFormat
from git_log_analyzer.models.report import KeywordMatch, Report

TOP_AUTHORS_LIMIT = 3
SHORT_HASH_LENGTH = 7


class ReportRenderer:
    """Formats analyzer results as JSON or a plain-text summary."""

    def __init__(self, analyzer: GitLogAnalyzer, config: AnalyzerConfig):
        self.analyzer = analyzer
        self.config = config

    def build_report(self) -> Report:
        """Collect the three analysis results into a report model."""
        return Report(
            top_authors=self.analyzer.top_authors(TOP_AUTHORS_LIMIT),
            found_keywords=[
                KeywordMatch(hash=commit.id, message=commit.subject)
                for commit in self.analyzer.find_commits_with_keywords()
            ],
            all_authors=self.analyzer.all_authors_sorted(),
        )

    def render(self) -> str:
        """Render the report in the configured output format."""
        if self.config.output_format == OutputFormat.PLAINTEXT:
            return self.render_plaintext()
        return self.render_json()

    def render_json(self) -> str:
        """Render the report as a pretty-printed JSON document."""
        report = self.build_report()
        return json.dumps(report.model_dump(), indent=2, ensure_ascii=False)

    def render_plaintext(self) -> str:
        """Render the report as a human-readable summary."""
        report = self.build_report()
        lines: List[str] = []

        lines.append(f"Top {TOP_AUTHORS_LIMIT} authors by commit count:")
        if report.top_authors:
            for position, author in enumerate(report.top_authors, start=1):
                noun = "commit" if author.commits == 1 else "commits"
                lines.append(f"  {position}. {author.name} - {author.commits} {noun}")
        else:
            lines.append("  No commits found.")

        lines.append("")
        lines.append("Commits matching keywords:")
        if report.found_keywords:
            for match in report.found_keywords:
                lines.append(f"  [{match.hash[:SHORT_HASH_LENGTH]}] {match.message}")
        else:
            lines.append("  No matching commits found.")

        lines.append("")
        lines.append("All authors:")
        if report.all_authors:
            for name in report.all_authors:
                lines.append(f"  • {name}")
        else:
            lines.append("  No authors found.")

        return "\n".join(lines)


def write_report(content: str, output_file: Path) -> Path:
    """Write the report, creating parent directories as needed.

    The file is written to a temporary sibling first and then moved into
    place, so a failed write never leaves a truncated report behind.
    """
    output_file = Path(output_file)
    output_file.parent.mkdir(parents=True, exist_ok=True)

    fd, temp_name = tempfile.mkstemp(
        prefix=f".{output_file.name}.", suffix=".tmp", dir=output_file.parent
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)
        os.replace(temp_name, output_file)
    except Exception:
        Path(temp_name).unlink(missing_ok=True)
        raise
    return output_file
