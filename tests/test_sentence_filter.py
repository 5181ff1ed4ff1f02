import pytest

from ungoliant.document import Document, Metadata
from ungoliant.sentence_filter import Conv, RemoveShortSentences, ShortSentences

MAIN = "MAIN CONTENT  MAIN CONTENT MAIN CONTENT MAIN CONTENT MAIN CONTENT "


def gen_valid():
    content = """foo
bar
baz

xxxxxxxxxxx
quux
xxxxxxxxxxx
xxxxxxxxxxx
foo
bar
baz
"""
    expected = """xxxxxxxxxxx
quux
xxxxxxxxxxx
xxxxxxxxxxx"""
    return Document(content, {}, Metadata()), expected


def gen_invalid():
    content = """foo
bar
baz

quux
foo
bar
baz
"""
    return Document(content, {}, Metadata())


def gen_long_doc():
    return Document("\n".join([MAIN] * 5), {}, Metadata())


def test_rss_default():
    assert RemoveShortSentences().min_length == 100


def test_rss():
    doc, expected = gen_valid()
    RemoveShortSentences(10).transform(doc)
    assert doc.content == expected


def test_rss_empty():
    doc = gen_invalid()
    RemoveShortSentences(10).transform(doc)
    assert doc.content == ""


def test_rss_idx():
    doc, _ = gen_valid()
    assert RemoveShortSentences(10).transform(doc) == [(4, 7)]


def test_rss_idx_invalid():
    doc = gen_invalid()
    assert RemoveShortSentences(10).transform(doc) == []


def test_rss_transform_text():
    doc, expected = gen_valid()
    content, ranges = RemoveShortSentences(10).transform_text(doc.content)
    assert content == expected
    assert ranges == [(4, 7)]


def test_annotate_short():
    doc = gen_long_doc()
    doc.content = """Long enough sentence here :)
tiny one
tiny one
tiny one
Long enough sentence here :)"""
    ShortSentences(10, 0.5).annotate(doc)
    assert "short_sentences" in doc.metadata.annotation


def test_no_annotation():
    doc = gen_long_doc()
    doc.content = """Long enough sentence here :)
tiny one
Long enough sentence here :)
Long enough sentence here :)
Long enough sentence here :)
tiny one
tiny one
Long enough sentence here :)"""
    ShortSentences(10, 0.5).annotate(doc)
    assert doc.metadata.annotation is None


def test_single_sentence():
    doc = gen_long_doc()
    doc.content = (
        "Ti Pebrero 29 ket ti maika-60 nga aldaw iti bisiesto a tawen iti kalendario "
        "a Gregoriano, nga addaan pay nabati a 306 nga al-aldaw tapno maungpot ti tawen."
    )
    ShortSentences().annotate(doc)
    assert doc.metadata.annotation is None


def test_conv_removes_edges():
    long_line = "x" * 20
    content = "\n".join(["a", "b", long_line, long_line, long_line, "c", "d"])
    doc = Document(content, {}, Metadata())
    conv = Conv(3, RemoveShortSentences(10))
    result, ranges = conv.transform_idx(doc)
    assert ranges == [(2, 4)]
    assert result.content == "\n".join([long_line] * 3)


def test_conv_all_short_keeps_document():
    doc = gen_invalid()
    original = doc.content
    result, ranges = Conv(3, RemoveShortSentences(10)).transform_idx(doc)
    assert ranges == []
    assert result.content == original


def test_conv_default_sizes():
    conv = Conv()
    assert (conv.conv_size, conv.rss.min_length) == (5, 100)


def test_conv_empty_document_raises():
    with pytest.raises(ValueError):
        Conv().transform_idx(Document("", {}, Metadata()))


def test_conv_zero_window_raises():
    with pytest.raises(ValueError):
        Conv(0).transform_idx(Document("some text", {}, Metadata()))