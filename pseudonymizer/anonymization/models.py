from dataclasses import dataclass, field


@dataclass(frozen=True)
class MergedEntitySpan:
    """A whole entity rebuilt from adjacent same-type token predictions."""

    entity_type: str
    text: str  # normalized fragments, concatenated without separators
    scores: tuple[float, ...] = ()  # confidence of each contributing fragment


@dataclass(frozen=True)
class Artifact:
    """Single pseudonym replacement record."""

    type: str  # e.g. "PERSON", "EMAIL", "PHONE"
    original: str  # merged span text
    replacement: str  # pseudonym used in the anonymized text, e.g. "PERSON_1"
    occurrences: int = 0  # matches rewritten for this span


@dataclass
class AnonymizationResult:
    """Output of the anonymization pipeline for one text unit."""

    anonymized_text: str
    artifacts: list[Artifact] = field(default_factory=list)
    skipped_spans: list[MergedEntitySpan] = field(default_factory=list)
