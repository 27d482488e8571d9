"""Update orchestration: check every dependency, then write back the new pins."""

from versionsync.updater.models import RunSummary, UpdateResult
from versionsync.updater.orchestrator import (
    build_updates,
    check_dependency,
    check_for_updates,
    run_update,
)
from versionsync.updater.report import format_github_output, print_report, write_github_output

__all__ = [
    "RunSummary",
    "UpdateResult",
    "build_updates",
    "check_dependency",
    "check_for_updates",
    "format_github_output",
    "print_report",
    "run_update",
    "write_github_output",
]
