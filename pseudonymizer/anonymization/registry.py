"""PseudonymRegistry: session-scoped mapping from entity text to pseudonym.

One registry per logical document (or per session that must share
identifiers). Entries are never removed or overwritten, except by ``reset``.
"""

import threading

from pseudonymizer.logging.logger import Log

_PSEUDONYM_FMT = "{type}_{idx}"


class PseudonymRegistry:
    """Stable text -> pseudonym store with monotonic per-type counters.

    Lookup is keyed by merged text alone. When the same text later arrives
    with a different entity type, the first pseudonym is kept and a warning
    is logged.
    """

    __slots__ = ("_text_to_pseudonym", "_text_to_type", "_counters", "_lock")

    def __init__(self) -> None:
        self._text_to_pseudonym: dict[str, str] = {}  # "JohnSmith" -> "PERSON_1"
        self._text_to_type: dict[str, str] = {}  # "JohnSmith" -> "PERSON"
        self._counters: dict[str, int] = {}  # "PERSON" -> next index
        self._lock = threading.Lock()

    def resolve(self, entity_type: str, text: str) -> str | None:
        """Return the pseudonym for *text*, assigning a new one on first sight.

        Returns None for empty text; nothing is registered in that case.
        """
        if not text:
            return None

        with self._lock:
            existing = self._text_to_pseudonym.get(text)
            if existing is not None:
                first_type = self._text_to_type[text]
                if first_type != entity_type:
                    Log.warning(
                        f"Entity typed {entity_type} was first registered as "
                        f"{first_type}; reusing {existing}"
                    )
                return existing

            idx = self._counters.get(entity_type, 1)
            pseudonym = _PSEUDONYM_FMT.format(type=entity_type, idx=idx)
            self._text_to_pseudonym[text] = pseudonym
            self._text_to_type[text] = entity_type
            self._counters[entity_type] = idx + 1
            return pseudonym

    def lookup(self, text: str) -> str | None:
        """Return the pseudonym already assigned to *text*, if any."""
        return self._text_to_pseudonym.get(text)

    def reset(self) -> None:
        """Forget every mapping and restart all counters at 1."""
        with self._lock:
            self._text_to_pseudonym.clear()
            self._text_to_type.clear()
            self._counters.clear()

    @property
    def size(self) -> int:
        return len(self._text_to_pseudonym)

    def dump(self) -> dict[str, str]:
        """Return a copy of the text -> pseudonym mapping (for debugging)."""
        return dict(self._text_to_pseudonym)
