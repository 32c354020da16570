"""Parsing of begin/inside/outside token labels."""

from dataclasses import dataclass
from enum import Enum

OUTSIDE = "OUTSIDE"

_BEGIN_PREFIX = "B-"
_INSIDE_PREFIX = "I-"
_OUTSIDE_LABELS = frozenset({"", "O"})


class TagKind(Enum):
    BEGIN = "B"
    INSIDE = "I"
    OUTSIDE = "O"


@dataclass(frozen=True)
class ParsedLabel:
    """A token label split into its tag and base entity type."""

    kind: TagKind
    entity_type: str

    @property
    def is_outside(self) -> bool:
        return self.kind is TagKind.OUTSIDE


OUTSIDE_LABEL = ParsedLabel(TagKind.OUTSIDE, OUTSIDE)


def parse_label(label: str) -> ParsedLabel:
    """Parse a raw classifier label.

    "B-PER" -> BEGIN(PER), "I-PER" -> INSIDE(PER), "O" or "" -> OUTSIDE.
    A label without a prefix is taken as a bare type and continues a span
    of that type like an inside tag does.
    """
    label = label.strip()
    if label in _OUTSIDE_LABELS:
        return OUTSIDE_LABEL
    if label.startswith(_BEGIN_PREFIX):
        kind, entity_type = TagKind.BEGIN, label[len(_BEGIN_PREFIX):]
    elif label.startswith(_INSIDE_PREFIX):
        kind, entity_type = TagKind.INSIDE, label[len(_INSIDE_PREFIX):]
    else:
        kind, entity_type = TagKind.INSIDE, label
    if not entity_type or entity_type == OUTSIDE:
        return OUTSIDE_LABEL
    return ParsedLabel(kind, entity_type)
