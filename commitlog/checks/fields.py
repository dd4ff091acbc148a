"""
* [x] Check that every commit has been signed off (Developer Certificate of Origin):
      the commit message must carry a "Signed-off-by:" line with a value.
* [x] Check that every commit names its author: the "Author:" header must be present
      and not empty.
"""

from typing import List

from commitlog.checks.base import RecordCheck, Issue, IssueType, IssueList
from commitlog.config import FieldLabel
from commitlog.records import CommitRecord, FieldMatch


E_MISSING_FIELD = IssueType(
    "4b0f7a3e-9d52-4c61-8e0b-2f6a91c7d3b5",
    "Missing {field} field for commit '{commit}'",
)

E_UNDEFINED_FIELD = IssueType(
    "c8e15d2a-3f47-4a9b-b6d0-71e2a5f83c94",
    "Undefined {field} value for commit '{commit}'",
)


class RequiredFieldCheck(RecordCheck):
    """Reports commits where a required field is missing or has no value."""

    def __init__(self, field: FieldLabel) -> None:
        self.field = field

    def check(self, record: CommitRecord) -> List[Issue]:
        issues = IssueList()

        match record.field(self.field.label):
            case FieldMatch.ABSENT:
                issues.append(E_MISSING_FIELD.make(field=self.field.name).at(record.commit_hash))
            case FieldMatch.EMPTY_VALUE:
                issues.append(E_UNDEFINED_FIELD.make(field=self.field.name).at(record.commit_hash))
            case FieldMatch.PRESENT:
                pass

        return issues.issues

    def __repr__(self) -> str:
        return f"RequiredFieldCheck({self.field})"
