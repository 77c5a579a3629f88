import pytest

from cobalt.document import Document, split_document
from cobalt.errors import ConfigError
from cobalt.frontmatter import ExplicitPermalink, Frontmatter
from cobalt.timestamp import from_ymd


def test_split_document_empty():
    assert split_document("") == (None, "")


def test_split_document_no_front_matter():
    assert split_document("Body") == (None, "Body")


def test_split_document_empty_front_matter():
    assert split_document("---\n---\nBody") == (None, "Body")


def test_split_document_empty_body():
    assert split_document("---\ncobalt_model\n---\n") == ("cobalt_model\n", "")


def test_split_document_front_matter_and_body():
    assert split_document("---\ncobalt_model\n---\nbody") == ("cobalt_model\n", "body")


def test_split_document_no_new_line_after_front_matter():
    text = "invalid_front_matter---\nbody"
    assert split_document(text) == (None, text)


def test_split_document_multiline_body():
    result = split_document("---\ncobalt_model\n---\nfirst\nsecond")
    assert result == ("cobalt_model\n", "first\nsecond")


def test_split_document_trailing_separator():
    assert split_document("title: x\n---\nbody") == ("title: x", "body")


def test_display_empty():
    assert str(Document(Frontmatter.empty(), "")) == ""


def test_display_empty_front():
    assert str(Document(Frontmatter.empty(), "body")) == "body"


def test_display_empty_body():
    assert str(Document(Frontmatter(slug="foo"), "")) == "---\nslug: foo\n---\n"


def test_display_both():
    assert str(Document(Frontmatter(slug="foo"), "body")) == "---\nslug: foo\n---\nbody"


def test_parse_reads_frontmatter():
    doc = Document.parse("---\ntitle: Hello\npublished_date: 2017-03-05\n---\nbody")
    front, content = doc.into_parts()
    assert front.title == "Hello"
    assert front.published_date == from_ymd(2017, 3, 5)
    assert content == "body"


def test_parse_round_trip():
    doc = Document(
        Frontmatter(
            title="Hello",
            permalink=ExplicitPermalink("/hello/"),
            published_date=from_ymd(2020, 1, 2),
            is_draft=True,
        ),
        "# Heading\n\ntext\n",
    )
    assert Document.parse(str(doc)) == doc


def test_parse_invalid_yaml():
    with pytest.raises(ConfigError):
        Document.parse("---\n: : [\n---\nbody")


def test_parse_invalid_field():
    with pytest.raises(ConfigError):
        Document.parse("---\nweight: heavy\n---\nbody")