# This source code is part of the biogff package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

import pytest
import biogff.gff as gff


def test_defaults():
    record = gff.Record("chr1", 1, 10)
    assert record.source is None
    assert record.feature is None
    assert record.score is None
    assert record.strand == gff.Strand.UNKNOWN
    assert record.phase is None
    assert record.attributes == ()


def test_attribute_normalization():
    """
    Attributes given as lists, dictionary items or single strings
    should be converted into nested tuples.
    """
    ref_attributes = (("ID", ("g1",)), ("Alias", ("a", "b")))
    assert gff.Record(
        "chr1", 1, 10, attributes=[["ID", ["g1"]], ("Alias", ["a", "b"])]
    ).attributes == ref_attributes
    assert gff.Record(
        "chr1", 1, 10, attributes={"ID": "g1", "Alias": ("a", "b")}.items()
    ).attributes == ref_attributes


def test_equality():
    """
    Records and comments are compared by value.
    """
    record1 = gff.Record("chr1", 1, 10, attributes=[("ID", ["g1"])])
    record2 = gff.Record("chr1", 1, 10, attributes=(("ID", ("g1",)),))
    assert record1 == record2
    assert hash(record1) == hash(record2)
    assert record1 != record2.replace(stop_pos=11)
    assert record1 != gff.Comment("chr1")
    assert gff.Comment("abc") == gff.Comment("abc")
    assert gff.Comment("abc") != gff.Comment("abd")
    assert len({gff.Comment("abc"), gff.Comment("abc")}) == 1


def test_immutability():
    record = gff.Record("chr1", 1, 10)
    with pytest.raises(AttributeError):
        record.start_pos = 5
    with pytest.raises(AttributeError):
        gff.Comment("abc").text = "def"


def test_replace():
    record = gff.Record("chr1", 1, 10, feature="gene")
    modified = record.replace(feature="CDS", phase=0)
    assert modified.feature == "CDS"
    assert modified.phase == 0
    assert modified.seqname == "chr1"
    # The original record is unchanged
    assert record.feature == "gene"
    assert record.phase is None
    with pytest.raises(TypeError):
        record.replace(start=5)


def test_get_attribute():
    record = gff.Record(
        "chr1", 1, 10,
        attributes=[("ID", ["g1"]), ("Parent", ["a", "b"]), ("ID", ["g2"])]
    )
    assert record.get_attribute("Parent") == ("a", "b")
    # The first occurrence of a tag is returned
    assert record.get_attribute("ID") == ("g1",)
    assert record.get_attribute("Name") is None


def test_invalid_strand():
    with pytest.raises(TypeError):
        gff.Record("chr1", 1, 10, strand="+")


def test_repr():
    record = gff.Record(
        "chr1", 1, 10, feature="gene", strand=gff.Strand.MINUS,
        attributes=[("ID", ["g1"])]
    )
    Record = gff.Record
    Strand = gff.Strand
    assert eval(repr(record)) == record
    Comment = gff.Comment
    assert eval(repr(gff.Comment("a 'quoted' text"))) \
        == gff.Comment("a 'quoted' text")
