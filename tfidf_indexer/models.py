from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, NamedTuple


@dataclass(frozen=True)
class Document:
    """One row of the source file. ``doc_id`` is its 0-based data-row position."""
    doc_id: int
    text: str


@dataclass
class DocumentTerms:
    """
    Intermediate per-document result of tokenization.

    ``tf`` maps each distinct canonical term to its (ceiling-rounded) term frequency.
    """
    doc_id: int
    text: str
    tf: Dict[str, float] = field(default_factory=dict)

    def to_document(self) -> Document:
        return Document(self.doc_id, self.text)


class TfIdfItem(NamedTuple):
    term: str
    doc_id: int
    weight: float
