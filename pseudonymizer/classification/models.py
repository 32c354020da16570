from dataclasses import dataclass


@dataclass(frozen=True)
class TokenPrediction:
    """One classified text fragment, as emitted by a token classifier."""

    text: str  # fragment as produced by the tokenizer, e.g. " Smith" or "▁Smith"
    label: str  # e.g. "B-PERSON", "I-PERSON", "O"
    score: float = 1.0
    start: int | None = None  # character offsets, when the backend reports them
    end: int | None = None
