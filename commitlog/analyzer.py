from typing import Iterable, List
import logging

from commitlog.checks.base import Issue, IssueList, RecordCheck
from commitlog.checks.fields import RequiredFieldCheck
from commitlog.config import AnalyzerConfig
from commitlog.records import CommitRecord, iter_records


class Analyzer:
    """
    Splits a raw `git log` dump into commit records and runs the required
    field checks on each of them.

    The analyzer prints nothing: it returns the issues in record order, and
    within a record in the order of `config.field_labels`.
    """

    def __init__(self, config: AnalyzerConfig | None = None) -> None:
        self.config = config or AnalyzerConfig()
        self.checks: List[RecordCheck] = [RequiredFieldCheck(f) for f in self.config.field_labels]

    def records(self, raw_text: str) -> List[CommitRecord]:
        return list(iter_records(raw_text, self.config.delimiter))

    def check_record(self, record: CommitRecord) -> IssueList:
        issues = IssueList()
        for check in self.checks:
            issues.extend(check.check(record))
        return issues

    def check_records(self, records: Iterable[CommitRecord]) -> List[Issue]:
        issues = IssueList()
        for record in records:
            found = self.check_record(record)
            if self.config.debug:
                logging.debug(f"Checking commit #{record.index} '{record.commit_hash}'")
                for issue in found:
                    logging.debug(f"  {issue.message}")
            issues.extend(found)
        return issues.issues

    def analyze(self, raw_text: str) -> List[Issue]:
        return self.check_records(iter_records(raw_text, self.config.delimiter))


def analyze(raw_text: str, config: AnalyzerConfig | None = None) -> List[Issue]:
    return Analyzer(config).analyze(raw_text)
