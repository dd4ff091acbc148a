from typing import Mapping, Tuple
from dataclasses import dataclass, field, replace
import os

################################################################################
# Defaults
################################################################################

COMMIT_DELIMITER = "commit"
SIGNED_OFF_LABEL = "Signed-off-by:"
AUTHOR_LABEL = "Author:"

DEBUG_ENV_VAR = "COMMITLOG_DEBUG"
TRUTHY_VALUES = frozenset(["1", "true", "yes", "on"])

################################################################################
# Field labels
################################################################################

@dataclass(frozen=True)
class FieldLabel:
    """
    A field every commit record must carry, e.g. ("author", "Author:").

    `name` is used in diagnostics, `label` is the text searched in the record.
    """
    name: str
    label: str

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name:
            raise ValueError(f"Invalid field name: {self.name!r}")
        if not isinstance(self.label, str) or not self.label:
            raise ValueError(f"Invalid field label: {self.label!r}")

    def __str__(self) -> str:
        return f"{self.name} ({self.label})"


SIGNED_OFF_FIELD = FieldLabel("signed-off", SIGNED_OFF_LABEL)
AUTHOR_FIELD = FieldLabel("author", AUTHOR_LABEL)

DEFAULT_FIELD_LABELS: Tuple[FieldLabel, ...] = (SIGNED_OFF_FIELD, AUTHOR_FIELD)

################################################################################
# Analyzer config
################################################################################

@dataclass(frozen=True)
class AnalyzerConfig:
    delimiter: str = COMMIT_DELIMITER
    # Checked in this order for every record
    field_labels: Tuple[FieldLabel, ...] = field(default=DEFAULT_FIELD_LABELS)
    debug: bool = False

    def __post_init__(self):
        if not isinstance(self.delimiter, str) or not self.delimiter:
            raise ValueError(f"Invalid record delimiter: {self.delimiter!r}")

        # FieldLabels or (name, label) pairs, stored as a tuple of FieldLabels
        labels = []
        for item in self.field_labels:
            if isinstance(item, FieldLabel):
                labels.append(item)
            elif isinstance(item, tuple) and len(item) == 2:
                labels.append(FieldLabel(*item))
            else:
                raise ValueError(f"Invalid field label: {item!r}")
        object.__setattr__(self, 'field_labels', tuple(labels))

        names = [f.name for f in self.field_labels]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"Duplicate field names: {', '.join(duplicates)}")

    def with_debug(self, enabled: bool = True) -> 'AnalyzerConfig':
        return replace(self, debug=enabled)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> 'AnalyzerConfig':
        """
        Default config, with debug logging switched on by COMMITLOG_DEBUG.
        """
        if environ is None:
            environ = os.environ
        value = environ.get(DEBUG_ENV_VAR, "").strip().lower()
        return cls(debug=value in TRUTHY_VALUES)
