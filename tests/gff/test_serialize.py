# This source code is part of the biogff package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

import pytest
import biogff.gff as gff


def _record(**kwargs):
    params = dict(
        source="src", feature="gene", score=None,
        strand=gff.Strand.PLUS, phase=None, attributes=[("ID", ["g1"])]
    )
    params.update(kwargs)
    return gff.Record("chr1", 1, 10, **params)


@pytest.mark.parametrize("version", [gff.GFFVersion.TWO, gff.GFFVersion.THREE])
@pytest.mark.parametrize("text", ["", "A comment", "#directive a b", "a\tb;c=d"])
def test_comment(text, version):
    """
    Comments are written unescaped, independent of the version.
    """
    assert gff.serialize_item(gff.Comment(text), version) == "#" + text


def test_absent_fields():
    record = gff.Record(
        "chr1", 1, 10, strand=gff.Strand.NOT_STRANDED
    )
    assert gff.serialize_item(record, gff.GFFVersion.THREE) \
        == "chr1\t.\t.\t1\t10\t.\t.\t.\t"


@pytest.mark.parametrize(
    "strand, symbol",
    [
        (gff.Strand.PLUS, "+"),
        (gff.Strand.MINUS, "-"),
        (gff.Strand.NOT_STRANDED, "."),
        (gff.Strand.UNKNOWN, "?"),
    ]
)
def test_strand(strand, symbol):
    line = gff.serialize_item(_record(strand=strand), gff.GFFVersion.THREE)
    assert line.split("\t")[6] == symbol
    assert gff.parse_line(line).strand == strand


@pytest.mark.parametrize(
    "score, text",
    [(1.0, "1.0"), (0.1, "0.1"), (1e-30, "1e-30"), (-2.5, "-2.5"), (3, "3.0")]
)
def test_score(score, text):
    line = gff.serialize_item(_record(score=score), gff.GFFVersion.THREE)
    assert line.split("\t")[5] == text


def test_gff3_line():
    record = _record(
        source="my;source", feature="a;b", phase=1, score=0.5,
        attributes=[("ID", ["g1"]), ("Note", ["x,y", "z=1"]), ("k;ey", [])]
    )
    assert gff.serialize_item(record, gff.GFFVersion.THREE) == (
        "chr1\tmy%3Bsource\ta;b\t1\t10\t0.5\t+\t1\t"
        "ID=g1;Note=x%2Cy,z%3D1;k%3Bey="
    )


def test_gff2_line():
    record = _record(
        source='my "source"', feature="a;b", phase=1,
        attributes=[("gene_id", ["g1"]), ("note", ["x", "y\tz"])]
    )
    assert gff.serialize_item(record, gff.GFFVersion.TWO) == (
        'chr1\t"my \\"source\\""\ta;b\t1\t10\t.\t+\t1\t'
        'gene_id "g1";note "x","y\\tz"'
    )


def test_feature_unescaped():
    """
    The feature column is written as it is, in contrast to the source.
    """
    record = _record(source="a=b", feature="a=b")
    for version, source in [
        (gff.GFFVersion.THREE, "a%3Db"),
        (gff.GFFVersion.TWO, '"a=b"'),
    ]:
        fields = gff.serialize_item(record, version).split("\t")
        assert fields[1] == source
        assert fields[2] == "a=b"


@pytest.mark.parametrize(
    "text, escaped",
    [
        ("plain", '"plain"'),
        ("", '""'),
        ('"', '"\\""'),
        ("\\", '"\\\\"'),
        ("\n\r\t\b", '"\\n\\r\\t\\b"'),
        ("\x00\x1f\x7f", '"\\000\\031\\127"'),
        ("ä", '"\\195\\164"'),
        ("a'b", "\"a'b\""),
    ]
)
def test_escape_gff2(text, escaped):
    assert gff.escape_gff2(text) == escaped


@pytest.mark.parametrize(
    "text, escaped",
    [
        ("plain text", "plain text"),
        ("%;=&,", "%25%3B%3D%26%2C"),
        ("\t\n", "%09%0A"),
        ("ä", "%C3%A4"),
        ("a:b|c(d)", "a:b|c(d)"),
    ]
)
def test_escape_gff3(text, escaped):
    assert gff.escape_gff3(text) == escaped


@pytest.mark.parametrize(
    "record",
    [
        gff.Record("chr1", 1, 10),
        gff.Record(
            "ctg123", -5, 123456789012345678901234567890,
            source="RefSeq curated", feature="CDS", score=1e-12,
            strand=gff.Strand.MINUS, phase=2,
            attributes=[
                ("ID", ["cds;1"]),
                ("Parent", ["mRNA=1", "mRNA,2"]),
                ("Note", ["50% identity", "tab\there", "Ångström"]),
                ("ta;g=,%", ["."]),
                ("ID", ["duplicate"]),
            ]
        ),
        gff.Record(
            "chr2", 10, 1, source="a.b", feature="c",
            strand=gff.Strand.NOT_STRANDED, score=0.0, phase=0,
            attributes=[("empty", [""])]
        ),
    ]
)
def test_gff3_round_trip(record):
    """
    Writing a record as GFF3 and parsing the line again should give the
    original record.
    """
    line = gff.serialize_item(record, gff.GFFVersion.THREE)
    assert "\n" not in line
    assert gff.parse_line(line) == record


def test_serialize_items():
    items = [gff.Comment("#gff-version 3"), _record()]
    lines = gff.serialize_items(items, gff.GFFVersion.THREE)
    assert lines == [
        "##gff-version 3",
        "chr1\tsrc\tgene\t1\t10\t.\t+\t.\tID=g1",
    ]
    assert gff.parse_lines(lines) == items


def test_invalid_input():
    with pytest.raises(TypeError):
        gff.serialize_item("chr1\t.", gff.GFFVersion.THREE)
    with pytest.raises(ValueError):
        gff.serialize_item(_record(), 3)


def test_source_round_trip_keeps_escapes():
    """
    The source is percent-encoded when written, but not decoded when
    read, so reserved characters come back in encoded form.
    """
    record = gff.Record("chr1", 1, 10, source="a;b")
    line = gff.serialize_item(record, gff.GFFVersion.THREE)
    assert line.split("\t")[1] == "a%3Bb"
    assert gff.parse_line(line).source == "a%3Bb"
