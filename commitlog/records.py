from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List
import enum

##################################################################################################
# Segmenter
##################################################################################################

def segment(raw_text: str, delimiter: str) -> List[str]:
    """
    Splits the raw log on every occurrence of the delimiter (case-sensitive).

    Segments are returned as-is, including empty ones and whatever precedes the
    first delimiter. Callers decide what counts as a record.
    """
    if not delimiter:
        raise ValueError("Record delimiter must not be empty")
    return raw_text.split(delimiter)


def is_blank(segment_text: str) -> bool:
    return not segment_text.strip()


##################################################################################################
# Commit records
##################################################################################################

def extract_hash(record: str) -> str:
    """
    Returns the first line of the record, trimmed. Not validated as a hash.
    """
    return record.split("\n", 1)[0].strip()


@dataclass(frozen=True)
class CommitRecord:
    text: str
    index: int = 0

    def __post_init__(self):
        if is_blank(self.text):
            raise ValueError("A commit record cannot be blank")

    @property
    def commit_hash(self) -> str:
        return extract_hash(self.text)

    def field(self, label: str) -> 'FieldMatch':
        return extract_field(self.text, label)


def iter_records(raw_text: str, delimiter: str) -> Iterator[CommitRecord]:
    """
    Yields the non-blank segments of the raw log as commit records, in input order.
    """
    index = 0
    for part in segment(raw_text, delimiter):
        if is_blank(part):
            continue
        yield CommitRecord(part, index)
        index += 1


##################################################################################################
# Field Extractor
##################################################################################################

class FieldMatch(enum.Enum):
    """
    Outcome of looking up a labeled field in a commit record.
    """
    ABSENT = "absent"
    EMPTY_VALUE = "empty"
    PRESENT = "present"


def extract_field(record: str, label: str) -> FieldMatch:
    """
    Looks up `label` in the record, ignoring case, and classifies the value
    written on the same line right after the first occurrence of the label.
    """
    record_lower = record.lower()
    label_lower = label.lower()

    if label_lower not in record_lower:
        return FieldMatch.ABSENT

    # Only the rest of the label's own line matters
    tail = record_lower.split(label_lower, 1)[1]
    value = tail.split("\n", 1)[0].strip()

    if len(value) == 0:
        return FieldMatch.EMPTY_VALUE
    return FieldMatch.PRESENT
