# cli.py
import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any
from typing import Dict
from typing import List

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from mapreduce_memory_analyzer.analyzer_service import JobAnalysis
from mapreduce_memory_analyzer.api import create_analyzer
from mapreduce_memory_analyzer.models.severity import Severity
from mapreduce_memory_analyzer.models.task_data import JobRecord
from mapreduce_memory_analyzer.utils.logging import setup_logging

console = Console()

SEVERITY_STYLES = {
    Severity.NONE: "green",
    Severity.LOW: "cyan",
    Severity.MODERATE: "yellow",
    Severity.SEVERE: "red",
    Severity.CRITICAL: "bold red",
}


def _read_jobs(job_file: Path) -> List[Dict[str, Any]]:
    with job_file.open() as f:
        data = json.load(f)
    return data if isinstance(data, list) else [data]


def _print_analysis(analysis: JobAnalysis) -> None:
    console.rule(f"[bold magenta]Job: {escape(analysis.job_id)}[/]")
    if not analysis.results and not analysis.errors:
        console.print("[dim]Job did not succeed, no heuristic applies.[/]")
        return

    for result in analysis.results:
        style = SEVERITY_STYLES[result.severity]
        table = Table(show_header=False, box=None)
        table.add_column("Metric", style="cyan bold")
        table.add_column("Value", style="green")
        for label, value in result.details:
            table.add_row(label, value)
        console.print(
            Panel(
                table,
                title=f"{escape(result.heuristic_name)}: [{style}]{result.severity.label}[/]",
                subtitle=f"score {result.score}",
                expand=False,
                border_style=style,
            )
        )

    for heuristic_name, error in analysis.errors.items():
        console.print(
            f"[bold red]{escape(heuristic_name)} failed:[/bold red] {escape(error)}"
        )


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="MapReduce container memory efficiency CLI"
    )
    parser.add_argument(
        "job_file", type=Path, help="JSON file with one job or a list of jobs"
    )
    parser.add_argument(
        "--config", type=Path, help="YAML heuristic configuration (e.g. config.yaml)"
    )
    parser.add_argument(
        "--json", action="store_true", help="Print results as JSON instead of tables"
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--log-file", type=str, help="Also write logs to this file")

    args = parser.parse_args(argv)
    setup_logging(logging.DEBUG if args.debug else logging.INFO, args.log_file)

    try:
        jobs = _read_jobs(args.job_file)
        analyzer = create_analyzer(args.config)
    except (OSError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}", style="red")
        sys.exit(2)

    analyses = []
    failed = 0
    for job_data in jobs:
        try:
            job = JobRecord.from_dict(job_data)
        except (KeyError, TypeError) as e:
            failed += 1
            console.print(
                f"[bold red]==== Invalid job record: {escape(str(e))} ====[/]"
            )
            continue
        analysis = analyzer.analyze(job)
        if analysis.errors:
            failed += 1
        analyses.append(analysis)
        if not args.json:
            _print_analysis(analysis)

    if args.json:
        print(json.dumps([a.to_dict() for a in analyses], indent=2))

    if failed:
        sys.exit(1)


if __name__ == "__main__":
    main()
