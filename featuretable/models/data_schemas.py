from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator


class Strand(str, Enum):
    FORWARD = "+"
    REVERSE = "-"


class Truncation(str, Enum):
    NONE = "none"
    FIVE_PRIME = "five_prime"
    THREE_PRIME = "three_prime"
    BOTH = "both"


def _flatten_qualifier_value(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return [str(v) for v in value]
    return [str(value)]


def _normalize_attributes(value: Any) -> Any:
    """Accept a JSON object or a list of pairs; return ordered (key, values) pairs."""
    if value is None:
        return []
    if isinstance(value, Mapping):
        items = value.items()
    elif isinstance(value, (list, tuple)):
        items = value
    else:
        return value
    pairs = []
    for item in items:
        if not isinstance(item, (list, tuple)) or len(item) != 2:
            return value
        key, values = item
        pairs.append((str(key), _flatten_qualifier_value(values)))
    return pairs


class Segment(BaseModel):
    start: int
    end: int
    strand: Optional[Strand] = None
    truncation: Truncation = Truncation.NONE
    attributes: list[tuple[str, list[str]]] = Field(default_factory=list)
    phase: int = Field(default=0, ge=0, le=2)

    @field_validator("attributes", mode="before")
    @classmethod
    def coerce_attributes(cls, value: Any) -> Any:
        return _normalize_attributes(value)


class Cds(BaseModel):
    segments: list[Segment] = Field(default_factory=list)


class Gene(BaseModel):
    start: int
    end: int
    strand: Optional[Strand] = None
    attributes: list[tuple[str, list[str]]] = Field(default_factory=list)
    cdses: list[Cds] = Field(default_factory=list)
    seqid: Optional[str] = None

    @field_validator("attributes", mode="before")
    @classmethod
    def coerce_attributes(cls, value: Any) -> Any:
        return _normalize_attributes(value)


class AnnotationSet(BaseModel):
    genes: list[Gene] = Field(default_factory=list)

    def is_empty(self) -> bool:
        return not self.genes

    @property
    def seq_id(self) -> Optional[str]:
        """Identifier for the ``>Feature`` line, taken from the first gene.

        ``None`` when there are no genes, since such a set produces no output.
        """
        if not self.genes:
            return None
        return self.genes[0].seqid or ""


class ResultRecord(BaseModel):
    seq_name: str = ""
    annotation: AnnotationSet = Field(default_factory=AnnotationSet)
