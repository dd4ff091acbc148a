from __future__ import annotations
from typing import List
from pathlib import Path
import logging

from commitlog.analyzer import Analyzer
from commitlog.checks.base import Issue, IssueList
from commitlog.config import AnalyzerConfig
from commitlog.messages import error

###############################################################################
# Input errors
###############################################################################

class CheckError(Exception):
    """
    A fatal problem with the command line or the input file. Raised before
    any commit is processed.
    """
    exit_code: int = 1


class UsageError(CheckError):
    exit_code = 2


class InputNotFound(CheckError):
    exit_code = 3


class InputNotAFile(CheckError):
    exit_code = 4


def resolve_log_file(log_file: str) -> Path:
    """
    Validates the path given on the command line.
    """
    if not log_file:
        raise UsageError(f"The file to use '{log_file}' is not defined")

    path = Path(log_file)
    if not path.exists():
        raise InputNotFound(f"The file to use '{log_file}' does not exist")
    if not path.is_file():
        raise InputNotAFile(f"The object at '{log_file}' is not a file")
    return path


def read_log(path: Path) -> str:
    return path.read_text(encoding="utf-8", errors="replace")

###############################################################################
# Presentation
###############################################################################

def report(issue: Issue | IssueList | List) -> None:
    if isinstance(issue, IssueList) or isinstance(issue, list):
        for i in issue:
            report(i)
        return

    error(issue.message)

###############################################################################
# Task
###############################################################################

def check_main(log_file: str, config: AnalyzerConfig | None = None) -> List[Issue]:
    """
    Checks every commit of a `git log` dump for an author and a sign-off,
    printing one line per finding. Returns the findings.
    """
    config = config or AnalyzerConfig()

    logging.debug(f"Should process commits in log file '{log_file}' with delimiter '{config.delimiter}'")
    path = resolve_log_file(log_file)
    logging.debug(f"Will process commits in log file '{log_file}' with delimiter '{config.delimiter}'")

    raw_text = read_log(path)

    analyzer = Analyzer(config)
    records = analyzer.records(raw_text)
    issues = analyzer.check_records(records)
    report(issues)

    logging.debug(f"Checked {len(records)} commit(s), found {len(issues)} issue(s)")
    return issues
