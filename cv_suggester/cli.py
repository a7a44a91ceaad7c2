"""CLI - run the suggestion pipeline on a local CV and render the critique."""

import argparse
import asyncio
import json
import mimetypes
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel
from rich.table import Table

from .config import load_config
from .config_validator import Severity, has_errors, validate_config
from .domain.submission import DocumentBlob, SubmissionRequest
from .domain.suggestions import Suggestions, parse_suggestions
from .errors import SuggestError, SuggestionParseError
from .observability import configure_logging
from .orchestrator import RequestOrchestrator
from .providers import create_providers

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_UNREADABLE = 2

console = Console()


def _bullets(items: List[str]) -> str:
    return "\n".join(f"- {item}" for item in items)


def render_suggestions(suggestions: Suggestions, out: Optional[Console] = None) -> None:
    """Print each critique section that has content."""
    out = out or console

    if suggestions.summary_rewrite:
        out.print(Panel(suggestions.summary_rewrite, title="Summary rewrite"))

    if suggestions.skills_to_frontload:
        out.print(Panel(", ".join(suggestions.skills_to_frontload), title="Skills to front-load"))

    if suggestions.section_order:
        out.print(Panel(" → ".join(suggestions.section_order), title="Suggested section order"))

    if suggestions.bullet_rewrites:
        table = Table(title="Bullet rewrites", show_lines=True)
        table.add_column("Section", style="cyan", no_wrap=True)
        table.add_column("Original")
        table.add_column("Improved", style="green")
        table.add_column("Why")
        table.add_column("Evidence to add", style="dim")
        for rewrite in suggestions.bullet_rewrites:
            table.add_row(
                rewrite.section or "-",
                rewrite.original or "(new)",
                rewrite.improved,
                rewrite.rationale,
                rewrite.evidence_to_add,
            )
        out.print(table)

    if suggestions.missing_keywords:
        out.print(Panel(", ".join(suggestions.missing_keywords), title="Missing keywords"))

    if suggestions.ats_notes:
        out.print(Panel(suggestions.ats_notes, title="ATS notes"))

    if suggestions.red_flags:
        out.print(Panel(Markdown(_bullets(suggestions.red_flags)), title="Red flags", border_style="red"))

    if suggestions.final_checks:
        out.print(Panel(Markdown(_bullets(suggestions.final_checks)), title="Final checks"))

    if suggestions.needs_clarification:
        out.print(Panel(
            Markdown(_bullets(suggestions.clarifications_needed)),
            title="Clarifications needed",
            border_style="yellow",
        ))


async def run_once(orchestrator: RequestOrchestrator, submission: SubmissionRequest, raw_json: bool) -> int:
    try:
        result = await orchestrator.run(submission)
    except SuggestError as e:
        console.print(f"❌ {e.category}: {e.message}", style="red")
        return EXIT_FAILED
    finally:
        await orchestrator.aclose()

    if raw_json:
        console.print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2), markup=False, highlight=False, soft_wrap=True)
        return EXIT_OK

    try:
        suggestions = parse_suggestions(result.suggestions)
    except SuggestionParseError as e:
        console.print(f"⚠️ {e.message}", style="yellow")
        console.print(str(result.suggestions), markup=False, highlight=False, soft_wrap=True)
        return EXIT_UNREADABLE

    console.print(f"📄 Stored as {result.document_ref.id}", style="dim")
    render_suggestions(suggestions)
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cv-suggest",
        description="CV Suggester - targeted edits for your CV from a language model",
    )
    parser.add_argument("cv", help="Path to the CV (PDF, DOC or DOCX)")
    parser.add_argument("--role", "-r", default="", help="Role you are targeting next")
    parser.add_argument("--jobs", "-j", default="", help="Key requirements from the job ads")
    parser.add_argument("--concerns", default="", help="Gaps, switches or ATS worries")
    parser.add_argument(
        "--config", "-c",
        default=None,
        help="Path to configuration file (default: config/config.yaml if present)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the raw response body instead of rendering it",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output (pipeline logs)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    configure_logging(verbose=args.verbose)

    try:
        config = load_config(args.config)
    except FileNotFoundError as e:
        console.print(f"⚠️ {e}", style="yellow")
        return EXIT_FAILED

    issues = validate_config(config)
    for issue in issues:
        style = "red" if issue.severity == Severity.ERROR else "yellow"
        console.print(f"{issue.field}: {issue.message}", style=style)
    if has_errors(issues):
        return EXIT_FAILED

    path = Path(args.cv)
    media_type, _ = mimetypes.guess_type(path.name)
    submission = SubmissionRequest(
        document=DocumentBlob.from_path(path, media_type=media_type) if path.is_file() else None,
        target_role=args.role,
        job_context=args.jobs,
        concerns=args.concerns,
    )

    uploader, invoker = create_providers(config)
    orchestrator = RequestOrchestrator(
        store=uploader,
        completion=invoker,
        allowed_media_types=config.allowed_media_types,
    )

    with console.status("Generating suggestions… this can take a moment."):
        return asyncio.run(run_once(orchestrator, submission, raw_json=args.json))


if __name__ == "__main__":
    sys.exit(main())
