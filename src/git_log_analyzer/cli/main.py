"""Main CLI interface for Git Log Analyzer."""

from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape

from git_log_analyzer import __version__
from git_log_analyzer.core.analyzer import GitLogAnalyzer
from git_log_analyzer.core.config import (
    DEFAULT_CONFIG_FILE,
    AnalyzerConfig,
    OutputFormat,
    load_properties,
    parse_keywords,
)
from git_log_analyzer.core.history import HistoryError, HistorySource, read_git_log
from git_log_analyzer.core.report import ReportRenderer, write_report

console = Console()
err_console = Console(stderr=True)


def load_config(
    config_path: Path,
    output_format: Optional[str] = None,
    output_file: Optional[str] = None,
    keywords: Optional[str] = None,
) -> AnalyzerConfig:
    """Load settings from a properties file and apply command-line overrides."""
    config = AnalyzerConfig.from_properties(load_properties(config_path))

    overrides = {}
    if output_format is not None:
        overrides["output_format"] = OutputFormat.parse(output_format)
    if output_file is not None:
        overrides["output_file"] = Path(output_file)
    if keywords is not None:
        overrides["keywords"] = parse_keywords(keywords)
    return config.model_copy(update=overrides)


def analyze(
    repo_path: Path, config: AnalyzerConfig, history_source: HistorySource
) -> GitLogAnalyzer:
    """Read raw history through ``history_source`` and analyze it."""
    return GitLogAnalyzer.from_log(history_source(repo_path), config)


@click.command()
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=str(DEFAULT_CONFIG_FILE),
    show_default=True,
    help="Properties file with analyzer settings",
)
@click.option(
    "--repo",
    "repo_path",
    type=click.Path(exists=True, file_okay=False),
    default=".",
    help="Path to the git repository to analyze",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "plaintext"], case_sensitive=False),
    default=None,
    help="Output format (overrides output.format)",
)
@click.option(
    "--output",
    "output_file",
    default=None,
    help="JSON report destination (overrides output.file)",
)
@click.option(
    "--keywords",
    default=None,
    help="Comma-separated keywords (overrides git.search.keywords)",
)
@click.option("--verbose", "-v", is_flag=True, help="Show diagnostic details")
@click.version_option(version=__version__)
def main(
    config_path: str,
    repo_path: str,
    output_format: Optional[str],
    output_file: Optional[str],
    keywords: Optional[str],
    verbose: bool,
):
    """Git Log Analyzer - top authors, keyword search and author list."""
    try:
        config = load_config(Path(config_path), output_format, output_file, keywords)
    except OSError as e:
        err_console.print(
            f"[red]Error: cannot read config {config_path}: {escape(str(e))}[/red]"
        )
        raise click.Abort() from e

    if verbose:
        if not Path(config_path).exists():
            err_console.print(
                f"[dim]No config file at {config_path}, using defaults[/dim]"
            )
        keyword_list = escape(", ".join(config.keywords)) or "-"
        err_console.print(f"[dim]Keywords: {keyword_list}[/dim]")
        err_console.print(f"[dim]Output format: {config.output_format.value}[/dim]")

    try:
        analyzer = analyze(Path(repo_path), config, read_git_log)
    except HistoryError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise click.Abort() from e

    if verbose:
        err_console.print(f"[dim]Parsed {len(analyzer.commits)} commits[/dim]")

    result = ReportRenderer(analyzer, config).render()
    console.print(
        result, markup=False, highlight=False, emoji=False, soft_wrap=True
    )

    if config.output_format == OutputFormat.JSON:
        try:
            written = write_report(result, config.output_file)
        except OSError as e:
            err_console.print(
                f"[red]Error: cannot write report to {config.output_file}: "
                f"{escape(str(e))}[/red]"
            )
            raise click.Abort() from e
        err_console.print(f"[green]✅ Report saved to {written}[/green]")


if __name__ == "__main__":
    main()
