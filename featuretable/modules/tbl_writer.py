"""Genbank 5-column feature table (TBL) writer.

See https://www.ncbi.nlm.nih.gov/genbank/feature_table/

Layout of one block::

    >Feature gb|MN908947.3|
    21563 <TAB> 25384 <TAB> gene
    <TAB> <TAB> <TAB> gene <TAB> S
    21563 <TAB> 25384 <TAB> CDS
    <TAB> <TAB> <TAB> product <TAB> surface glycoprotein
"""
from __future__ import annotations

import io
import logging
from contextlib import ExitStack
from pathlib import Path
from typing import Iterable, Iterator, TextIO

from ..config import (
    CDS_FEATURE_KEY,
    CODON_START_QUALIFIER,
    DEFAULT_DIALECT,
    FEATURE_HEADER_PREFIX,
    GENE_FEATURE_KEY,
    QUALIFIER_PAD,
    TblDialect,
)
from ..models.data_schemas import AnnotationSet, Cds, Gene, ResultRecord
from ..utils.coord_utils import to_tbl_coordinates
from ..utils.exceptions import TextDecodingError
from ..utils.record_sink import TblRecordSink, open_output

log = logging.getLogger(__name__)


def iter_qualifier_rows(attributes: Iterable[tuple[str, list[str]]]) -> Iterator[list[str]]:
    for key, values in attributes:
        for value in values:
            yield [*QUALIFIER_PAD, key, value]


class GenbankTblWriter:
    """Writes annotation sets into a text stream.

    Every call to :meth:`write_annotation` appends a complete, independent
    ``>Feature`` block.
    """

    def __init__(self, stream: TextIO, dialect: TblDialect = DEFAULT_DIALECT) -> None:
        self.sink = TblRecordSink(stream, dialect)

    def write_annotation(self, annotation: AnnotationSet) -> None:
        if annotation.is_empty():
            log.debug("annotation has no genes; nothing written")
            return

        seq_id = annotation.seq_id
        self.sink.write_record([f"{FEATURE_HEADER_PREFIX}{seq_id}"])

        for gene in annotation.genes:
            self._write_gene(gene)
            for cds in gene.cdses:
                self._write_cds(cds)

        log.debug("wrote %d genes for sequence %r", len(annotation.genes), seq_id)

    def flush(self) -> None:
        self.sink.flush()

    def _write_gene(self, gene: Gene) -> None:
        first, second = to_tbl_coordinates(gene.start, gene.end, gene.strand, what="gene")
        self.sink.write_record([first, second, GENE_FEATURE_KEY])
        self._write_qualifiers(gene.attributes)

    def _write_cds(self, cds: Cds) -> None:
        for i, segment in enumerate(cds.segments):
            first, second = to_tbl_coordinates(
                segment.start,
                segment.end,
                segment.strand,
                segment.truncation,
                what="CDS segment",
            )
            # feature key only on the first interval, the rest are continuation lines
            feature_type = CDS_FEATURE_KEY if i == 0 else ""
            self.sink.write_record([first, second, feature_type])
            self._write_qualifiers(segment.attributes)

            if i == 0:
                codon_start = segment.phase + 1
                if codon_start != 1:
                    self.sink.write_record([*QUALIFIER_PAD, CODON_START_QUALIFIER, str(codon_start)])

    def _write_qualifiers(self, attributes: Iterable[tuple[str, list[str]]]) -> None:
        for row in iter_qualifier_rows(attributes):
            self.sink.write_record(row)


class GenbankTblFileWriter:
    """Feature table writer owning a file, or standard output for ``-``."""

    def __init__(self, filepath: str | Path, dialect: TblDialect = DEFAULT_DIALECT) -> None:
        self.filepath = filepath
        self._stack = ExitStack()
        stream = self._stack.enter_context(open_output(filepath, dialect))
        self.writer = GenbankTblWriter(stream, dialect)

    def write_annotation(self, annotation: AnnotationSet) -> None:
        self.writer.write_annotation(annotation)

    def close(self) -> None:
        self._stack.close()
        log.info("closed feature table %s", self.filepath)

    def __enter__(self) -> GenbankTblFileWriter:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def results_to_tbl_string(
    results: Iterable[ResultRecord],
    dialect: TblDialect = DEFAULT_DIALECT,
) -> str:
    buf = io.BytesIO()
    text = io.TextIOWrapper(buf, encoding=dialect.encoding, newline="", write_through=True)
    try:
        writer = GenbankTblWriter(text, dialect)
        for result in results:
            writer.write_annotation(result.annotation)
        writer.flush()
    finally:
        text.detach()

    return decode_tbl_bytes(buf.getvalue(), dialect.encoding)


def decode_tbl_bytes(data: bytes, encoding: str = DEFAULT_DIALECT.encoding) -> str:
    try:
        return data.decode(encoding)
    except UnicodeDecodeError as exc:
        raise TextDecodingError(f"feature table is not valid {encoding}: {exc}") from exc
