import abc
from typing import Any, List, Mapping
from dataclasses import dataclass, field
import uuid

from commitlog.records import CommitRecord


@dataclass(frozen=True)
class IssueType:
    """
    Represents a type of issue.
    """
    id: str
    message: str

    def __post_init__(self):
        # Verify that the ID is a valid UUID
        if not isinstance(self.id, str):
            raise ValueError(f"Invalid ID: {self.id}")
        try:
            uuid.UUID(self.id)
        except ValueError:
            raise ValueError(f"Invalid UUID: {self.id}")

    def make(self, **kwargs) -> 'Issue':
        """
        Creates an Issue of this type.
        """
        return Issue(self, data=kwargs)


@dataclass
class Issue:
    """
    Represents an issue found in a commit record.
    """
    issue_type: IssueType
    data: Mapping[str, Any] | None = None
    commit: str | None = None

    def at(self, commit: str) -> 'Issue':
        """
        Attaches the issue to a commit.
        """
        if self.commit is not None and self.commit != commit:
            raise ValueError("Cannot change the commit of an existing issue.")
        self.commit = commit
        return self

    @property
    def message(self) -> str:
        data = dict(self.data or {})
        if self.commit is not None:
            data.setdefault("commit", self.commit)
        return self.issue_type.message.format(**data)


@dataclass
class IssueList:
    """
    Represents an ordered list of issues found during a check.
    """
    issues: List[Issue] = field(default_factory=list)

    def append(self, issue: Issue) -> None:
        """
        Adds an issue to the list.
        """
        self.issues.append(issue)

    def __iter__(self):
        """
        Returns an iterator over the issues.
        """
        return iter(self.issues)

    def __len__(self) -> int:
        return len(self.issues)

    def extend(self, issues: List[Issue] | 'IssueList') -> None:
        """
        Adds multiple issues to the list.
        """
        if isinstance(issues, IssueList):
            self.issues.extend(issues.issues)
        else:
            self.issues.extend(issues)


class RecordCheck(abc.ABC):
    @abc.abstractmethod
    def check(self, record: CommitRecord) -> List[Issue]:
        raise NotImplementedError()
