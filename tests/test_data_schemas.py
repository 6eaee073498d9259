import pytest
from pydantic import ValidationError

from featuretable.models.data_schemas import AnnotationSet, Gene, Segment, Strand, Truncation


def test_attributes_from_mapping_keep_order():
    gene = Gene(start=0, end=10, attributes={"product": "x", "note": ["b", "a"], "gene": 5})
    assert gene.attributes == [("product", ["x"]), ("note", ["b", "a"]), ("gene", ["5"])]


def test_attributes_from_pairs_keep_duplicates():
    gene = Gene(start=0, end=10, attributes=[["note", ["a"]], ["note", ["a", "b"]]])
    assert gene.attributes == [("note", ["a"]), ("note", ["a", "b"])]


def test_enum_values_from_json():
    seg = Segment.model_validate_json('{"start": 1, "end": 4, "strand": "-", "truncation": "both", "phase": 2}')
    assert seg.strand is Strand.REVERSE
    assert seg.truncation is Truncation.BOTH


def test_segment_defaults():
    seg = Segment(start=1, end=4)
    assert seg.strand is None
    assert seg.truncation is Truncation.NONE
    assert seg.phase == 0
    assert seg.attributes == []


@pytest.mark.parametrize("phase", [-1, 3])
def test_phase_out_of_range(phase):
    with pytest.raises(ValidationError):
        Segment(start=1, end=4, phase=phase)


def test_seq_id():
    assert AnnotationSet().seq_id is None
    assert AnnotationSet(genes=[Gene(start=0, end=1)]).seq_id == ""
    assert AnnotationSet(genes=[Gene(start=0, end=1, seqid="chr1"), Gene(start=0, end=1, seqid="chr2")]).seq_id == "chr1"
