from __future__ import annotations

import logging
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from ..models.data_schemas import ResultRecord
from ..utils.exceptions import ResultsFormatError
from .tbl_writer import results_to_tbl_string

log = logging.getLogger(__name__)

_RESULTS_ADAPTER = TypeAdapter(list[ResultRecord])


def parse_results(json_text: str | bytes) -> list[ResultRecord]:
    try:
        results = _RESULTS_ADAPTER.validate_json(json_text)
    except ValidationError as exc:
        raise ResultsFormatError(f"invalid result records: {exc}") from exc
    log.debug("parsed %d result records", len(results))
    return results


def load_results(path: str | Path) -> list[ResultRecord]:
    path = Path(path)
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise ResultsFormatError(f"cannot read {path}: {exc}") from exc
    return parse_results(raw)


def serialize_results_tbl(json_text: str | bytes) -> str:
    """Feature table text for a JSON array of result records."""
    return results_to_tbl_string(parse_results(json_text))
