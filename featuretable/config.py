from __future__ import annotations

from dataclasses import dataclass


FEATURE_HEADER_PREFIX = ">Feature "

GENE_FEATURE_KEY = "gene"
CDS_FEATURE_KEY = "CDS"
CODON_START_QUALIFIER = "codon_start"

# empty start, end and feature key columns in front of a qualifier
QUALIFIER_PAD = ("", "", "")

FIVE_PRIME_MARKER = "<"
THREE_PRIME_MARKER = ">"

STDOUT_PATH = "-"
TBL_FILE_SUFFIX = ".tbl"

TBL_FORMAT_URL = "https://www.ncbi.nlm.nih.gov/genbank/feature_table/"


@dataclass(frozen=True)
class TblDialect:
    delimiter: str = "\t"
    lineterminator: str = "\n"
    encoding: str = "utf-8"


DEFAULT_DIALECT = TblDialect()
