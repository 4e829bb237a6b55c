"""Tests for line-oriented frontmatter editing."""

from textwrap import dedent

from auto_timestamp.markdown.frontmatter import (
    add_frontmatter,
    parse_frontmatter,
    update_modified_time,
)


def test_parse_frontmatter_no_block():
    assert parse_frontmatter("# Title\nbody") is None
    assert parse_frontmatter("") is None
    assert parse_frontmatter("---") is None


def test_parse_frontmatter_unclosed_block():
    assert parse_frontmatter("---\ntitle: x\nbody without end") is None


def test_parse_frontmatter_lines():
    frontmatter = parse_frontmatter("---\nfoo: bar\ntags: [a]\n---\nbody")

    assert frontmatter is not None
    assert frontmatter.lines == ["foo: bar", "tags: [a]"]
    assert frontmatter.rest == "\nbody"
    assert frontmatter.find("tags") == 1
    assert frontmatter.find("missing") is None


def test_parse_frontmatter_delimiter_must_be_exact():
    text = "---\nfoo: bar\n----\nstill: frontmatter\n---\nbody"
    frontmatter = parse_frontmatter(text)

    assert frontmatter is not None
    assert frontmatter.lines == ["foo: bar", "----", "still: frontmatter"]


def test_parse_frontmatter_render_is_verbatim():
    text = "---\nfoo: bar\n\n# comment\n---\n\nbody\n---\nmore\n"
    assert parse_frontmatter(text).render() == text


def test_add_frontmatter_example():
    result = add_frontmatter("---\nfoo: bar\n---\nbody", "X", "X", "created", "modified")
    assert result == "---\ncreated: X\nfoo: bar\nmodified: X\n---\nbody"


def test_add_frontmatter_without_block():
    body = "# Note\n\nSome text.\n"
    result = add_frontmatter(body, "C", "M", "created", "modified")

    lines = result.split("\n")
    assert lines[:4] == ["---", "created: C", "modified: M", "---"]
    assert result == "---\ncreated: C\nmodified: M\n---\n" + body


def test_add_frontmatter_empty_document():
    result = add_frontmatter("", "V", "V", "created", "modified")
    assert result == "---\ncreated: V\nmodified: V\n---\n"


def test_add_frontmatter_preserves_unrelated_lines():
    text = dedent(
        """\
        ---
        title: "Quoted: value"
        tags:
          - one
          - two
        aliases: []
        ---
        Body text
        """
    )

    result = add_frontmatter(text, "V", "V", "created", "modified")

    assert result == dedent(
        """\
        ---
        created: V
        title: "Quoted: value"
        tags:
          - one
          - two
        aliases: []
        modified: V
        ---
        Body text
        """
    )


def test_add_frontmatter_keeps_existing_keys():
    text = "---\nmodified: old\ncreated: older\n---\nbody"
    assert add_frontmatter(text, "new", "new", "created", "modified") == text


def test_add_frontmatter_only_missing_key():
    text = "---\ncreated: 2020\n---\nbody"
    result = add_frontmatter(text, "new", "new", "created", "modified")
    assert result == "---\ncreated: 2020\nmodified: new\n---\nbody"


def test_add_frontmatter_key_must_start_line():
    text = "---\nnot_created: x\n  created: nested\ncreated_at: y\n---\nbody"
    result = add_frontmatter(text, "V", "V", "created", "modified")

    assert result.startswith("---\ncreated: V\nnot_created: x\n")


def test_add_frontmatter_is_case_sensitive():
    text = "---\nCreated: x\n---\n"
    result = add_frontmatter(text, "V", "V", "created", "modified")
    assert result == "---\ncreated: V\nCreated: x\nmodified: V\n---\n"


def test_add_frontmatter_custom_keys():
    result = add_frontmatter("body", "1", "2", "date created", "date modified")
    assert result == "---\ndate created: 1\ndate modified: 2\n---\nbody"


def test_add_frontmatter_empty_block():
    result = add_frontmatter("---\n---\nbody", "V", "V", "created", "modified")
    assert result == "---\ncreated: V\nmodified: V\n---\nbody"


def test_add_frontmatter_crlf_document():
    text = "---\r\ntitle: x\r\n---\r\nbody\r\n"
    result = add_frontmatter(text, "V", "V", "created", "modified")
    assert result == "---\r\ncreated: V\r\ntitle: x\r\nmodified: V\r\n---\r\nbody\r\n"


def test_add_frontmatter_only_touches_leading_block():
    text = "intro\n---\nfoo: bar\n---\n"
    result = add_frontmatter(text, "V", "V", "created", "modified")
    assert result == "---\ncreated: V\nmodified: V\n---\n" + text


def test_update_modified_time_without_block():
    text = "# No frontmatter\nbody"
    assert update_modified_time(text, "V", "created", "modified") == text


def test_update_modified_time_replaces_value_in_place():
    text = "---\ncreated: a\nmodified: old\ntitle: t\n---\nbody"
    result = update_modified_time(text, "new", "created", "modified")
    assert result == "---\ncreated: a\nmodified: new\ntitle: t\n---\nbody"


def test_update_modified_time_only_first_occurrence():
    text = "---\nmodified: one\nmodified: two\ncreated: c\n---\n"
    result = update_modified_time(text, "new", "created", "modified")
    assert result == "---\nmodified: new\nmodified: two\ncreated: c\n---\n"


def test_update_modified_time_appends_missing_key():
    text = "---\ncreated: a\n---\nbody"
    result = update_modified_time(text, "new", "created", "modified")
    assert result == "---\ncreated: a\nmodified: new\n---\nbody"


def test_update_modified_time_backfills_created():
    text = "---\ntitle: t\n---\nbody"
    result = update_modified_time(text, "V", "created", "modified")
    assert result == "---\ncreated: V\ntitle: t\nmodified: V\n---\nbody"


def test_update_modified_time_is_idempotent():
    text = "---\ntitle: t\nmodified: old\n---\nbody"
    once = update_modified_time(text, "V", "created", "modified")
    twice = update_modified_time(once, "V", "created", "modified")
    assert once == twice


def test_update_modified_time_keeps_crlf():
    text = "---\r\ncreated: a\r\nmodified: old\r\n---\r\nbody"
    result = update_modified_time(text, "new", "created", "modified")
    assert result == "---\r\ncreated: a\r\nmodified: new\r\n---\r\nbody"


def test_update_modified_time_body_untouched():
    body = "\nmodified: this is body text\n---\nnot frontmatter\n"
    text = "---\nmodified: old\ncreated: c\n---" + body
    result = update_modified_time(text, "new", "created", "modified")
    assert result.endswith("---" + body)
    assert result.count("modified: this is body text") == 1
