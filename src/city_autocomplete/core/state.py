"""State definitions for the city autocomplete."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Protocol, Sequence, Tuple


class FieldStatus(Enum):
    """Where the field is in its edit / lookup / select cycle."""
    EMPTY = "empty"
    TYPING = "typing"
    AWAITING_LOOKUP = "awaiting_lookup"
    SUGGESTIONS_SHOWN = "suggestions_shown"
    VALIDATED = "validated"


@dataclass(frozen=True)
class Candidate:
    """One selectable suggestion. Compared by display label only."""
    label: str  # "City, Country"
    identity: Any = field(default=None, compare=False, hash=False)  # Provider record, opaque.

    def __str__(self) -> str:
        return self.label


@dataclass(frozen=True)
class Query:
    """The text that triggered a lookup and its issue sequence number."""
    text: str
    seq: int


@dataclass(frozen=True)
class SuggestionList:
    """Candidates produced by one query, in provider order."""
    query: Optional[Query]
    candidates: Tuple[Candidate, ...] = ()

    @classmethod
    def empty(cls) -> "SuggestionList":
        return cls(query=None, candidates=())

    @classmethod
    def from_results(cls, query: Query, results: Sequence[Any]) -> "SuggestionList":
        """Keep provider order; drop repeated labels after the first."""
        seen = set()
        candidates = []
        for item in results or ():
            candidate = item if isinstance(item, Candidate) else Candidate(str(item))
            if candidate.label in seen:
                continue
            seen.add(candidate.label)
            candidates.append(candidate)
        return cls(query=query, candidates=tuple(candidates))

    @property
    def labels(self) -> Tuple[str, ...]:
        return tuple(c.label for c in self.candidates)

    def contains_label(self, text: str) -> bool:
        return any(c.label == text for c in self.candidates)

    def __len__(self) -> int:
        return len(self.candidates)

    def __iter__(self):
        return iter(self.candidates)

    def __getitem__(self, index: int) -> Candidate:
        return self.candidates[index]


@dataclass
class InputState:
    """Live state of the field for the lifetime of the component."""
    raw_text: str = ""  # Exactly what is in the field.
    is_user_editing: bool = False  # Last change came from typing, not a pick or seed.
    is_validated_selection: bool = False  # Picked, or settled lookup matched raw_text verbatim.


class CityLookup(Protocol):
    """Anything that turns a non-empty prefix into candidates, asynchronously."""

    async def search(self, prefix: str) -> Sequence[Candidate]:
        ...
