"""Rebuilds whole entity spans from fragmentary token predictions.

Tokenizers split entities into sub-word pieces ("Bay", "ona", "Wil", "ber").
The merger strips separators from every piece and concatenates adjacent
pieces of the same entity type, so the pieces above become "BayonaWilber".

The merge is a two-state machine, Idle and Accumulating(type), advanced by
``step``. Begin and inside tags are not distinguished: a same-type begin tag
continues the open span.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from pseudonymizer.anonymization.labels import ParsedLabel, parse_label
from pseudonymizer.anonymization.models import MergedEntitySpan
from pseudonymizer.classification.models import TokenPrediction

_RETAINED_PUNCTUATION = frozenset(".,'-")


@dataclass(frozen=True)
class Accumulating:
    """An open span: its type, the fragments so far, and their scores."""

    entity_type: str
    buffer: str
    scores: tuple[float, ...]

    def extend(self, fragment: str, score: float) -> "Accumulating":
        return Accumulating(self.entity_type, self.buffer + fragment, self.scores + (score,))

    def flush(self) -> MergedEntitySpan:
        return MergedEntitySpan(self.entity_type, self.buffer, self.scores)


# Idle is represented by None.
MergeState = Accumulating | None


def normalize_fragment(text: str) -> str:
    """Drop whitespace and every character outside alphanumerics and .,'-"""
    return "".join(ch for ch in text if ch.isalnum() or ch in _RETAINED_PUNCTUATION)


def step(
    state: MergeState,
    label: ParsedLabel,
    fragment: str,
    score: float,
) -> tuple[MergeState, MergedEntitySpan | None]:
    """Advance the merge by one non-empty fragment.

    Returns the next state and the span completed by this token, if any.
    """
    if state is not None and not label.is_outside and label.entity_type == state.entity_type:
        return state.extend(fragment, score), None

    emitted = state.flush() if state is not None else None
    if label.is_outside:
        return None, emitted
    return Accumulating(label.entity_type, fragment, (score,)), emitted


def merge_predictions(predictions: Iterable[TokenPrediction]) -> list[MergedEntitySpan]:
    """Merge ordered token predictions into ordered entity spans."""
    spans: list[MergedEntitySpan] = []
    state: MergeState = None

    for prediction in predictions:
        fragment = normalize_fragment(prediction.text)
        if not fragment:
            # Punctuation-only pieces never break an open span.
            continue
        state, emitted = step(state, parse_label(prediction.label), fragment, prediction.score)
        if emitted is not None:
            spans.append(emitted)

    if state is not None:
        spans.append(state.flush())
    return spans
