"""
Unit tests for the post parser.
Tests header parsing, tag lines, body joining and file loading.
"""

from datetime import date
from pathlib import Path

import pytest

from src.blog.post_parser import (
    LINE_BREAK,
    Post,
    PostSummary,
    format_date,
    join_body,
    load_post,
    parse_date,
    parse_post,
    parse_tags,
    split_lines,
)
from src.common.errors import MalformedPostError, PostNotFoundError


class TestParsePost:
    """Tests for parse_post()."""

    def test_well_formed_post(self):
        text = "Title\n3/4/2023\n[[tags: a b]]\n\nline1\nline2\n"
        post = parse_post(text, "my-post")

        assert post.title == "Title"
        assert post.filename == "my-post"
        assert post.date == date(2023, 3, 4)
        assert post.tags == ("a", "b")
        assert post.content == "line1\n<br>\nline2"

    def test_title_taken_verbatim(self):
        post = parse_post("  Spaced <Title>  \n1/2/2006\n\n\nbody", "p")
        assert post.title == "  Spaced <Title>  "

    def test_zero_body_lines(self):
        post = parse_post("Title\n1/2/2006\n[[tags: x]]\n", "p")
        assert post.content == ""

    def test_header_only_without_separator(self):
        post = parse_post("Title\n1/2/2006", "p")
        assert post.content == ""
        assert post.tags == ()

    def test_single_body_line_has_no_break_marker(self):
        post = parse_post("Title\n1/2/2006\n\n\nonly line", "p")
        assert post.content == "only line"
        assert "<br>" not in post.content

    def test_empty_final_line_contributes_nothing(self):
        post = parse_post("Title\n1/2/2006\n\n\nfirst\nsecond\n\n", "p")
        assert post.content == "first\n<br>\nsecond"
        assert not post.content.endswith(LINE_BREAK)

    def test_inner_empty_lines_are_kept(self):
        post = parse_post("Title\n1/2/2006\n\n\nfirst\n\nthird", "p")
        assert post.content == "first\n<br>\n\n<br>\nthird"

    def test_non_tag_line_is_consumed_not_body(self):
        post = parse_post("Title\n1/2/2006\nnot a tag line\n\nbody", "p")
        assert post.tags == ()
        assert post.content == "body"
        assert "not a tag line" not in post.content

    def test_separator_line_is_not_validated(self):
        post = parse_post("Title\n1/2/2006\n\nseparator text\nbody", "p")
        assert post.content == "body"

    def test_windows_line_endings(self):
        post = parse_post("Title\r\n12/25/2022\r\n[[tags: x]]\r\n\r\na\r\nb\r\n", "p")
        assert post.date == date(2022, 12, 25)
        assert post.tags == ("x",)
        assert post.content == "a\n<br>\nb"

    def test_unicode_line_separator_stays_in_title(self):
        post = parse_post("Intro\u2028Part 2\n3/4/2023\n\n\nbody", "p")
        assert post.title == "Intro\u2028Part 2"
        assert post.date == date(2023, 3, 4)
        assert post.content == "body"

    def test_form_feed_stays_in_body_line(self):
        post = parse_post("T\n3/4/2023\n\n\na\x0cb", "p")
        assert post.content == "a\x0cb"

    def test_body_html_passes_through(self):
        post = parse_post("Title\n1/2/2006\n\n\n<em>hi</em>", "p")
        assert post.content == "<em>hi</em>"

    @pytest.mark.parametrize("bad_date", ["2023-03-04", "3/4/23", "13/1/2023", "March 4 2023", ""])
    def test_invalid_date_is_malformed(self, bad_date):
        with pytest.raises(MalformedPostError) as exc_info:
            parse_post(f"Title\n{bad_date}\n\n\nbody", "bad")
        assert exc_info.value.post_id == "bad"

    def test_missing_date_line_is_malformed(self):
        with pytest.raises(MalformedPostError):
            parse_post("Title only", "p")

    def test_empty_file_is_malformed(self):
        with pytest.raises(MalformedPostError):
            parse_post("", "p")

    def test_post_is_immutable(self):
        post = parse_post("Title\n1/2/2006\n\n\nbody", "p")
        with pytest.raises(Exception):
            post.title = "changed"


class TestParseDate:
    def test_unpadded(self):
        assert parse_date("1/2/2006") == date(2006, 1, 2)

    def test_zero_padded_accepted(self):
        assert parse_date("01/02/2006") == date(2006, 1, 2)

    def test_surrounding_whitespace_ignored(self):
        assert parse_date(" 3/4/2023 ") == date(2023, 3, 4)

    def test_impossible_date(self):
        with pytest.raises(MalformedPostError):
            parse_date("2/30/2023")


class TestParseTags:
    def test_tags_split_on_whitespace(self):
        assert parse_tags("[[tags: a  b\tc]]") == ("a", "b", "c")

    def test_duplicates_and_order_kept(self):
        assert parse_tags("[[tags: b a b]]") == ("b", "a", "b")

    def test_empty_line(self):
        assert parse_tags("") == ()

    def test_empty_tag_list(self):
        assert parse_tags("[[tags:]]") == ()

    @pytest.mark.parametrize("line", ["tags: a b", "[[tag: a]]", "[tags: a]", "[[tags: a]] extra"])
    def test_other_shapes_give_no_tags(self, line):
        assert parse_tags(line) == ()


class TestJoinBody:
    def test_no_lines(self):
        assert join_body([]) == ""

    def test_only_empty_lines(self):
        assert join_body(["", ""]) == ""

    def test_two_lines(self):
        assert join_body(["a", "b"]) == "a\n<br>\nb"


class TestSplitLines:
    def test_empty_text(self):
        assert split_lines("") == []

    def test_final_newline_adds_no_line(self):
        assert split_lines("a\nb\n") == ["a", "b"]

    def test_only_one_carriage_return_stripped(self):
        assert split_lines("a\r\r\nb\r\n") == ["a\r", "b"]

    def test_other_separators_kept(self):
        assert split_lines("a\x0bb\x1cc\x85d\u2029e\nf") == ["a\x0bb\x1cc\x85d\u2029e", "f"]


class TestDateDisplay:
    def test_format_date_unpadded(self):
        assert format_date(date(2023, 3, 4)) == "3/4/2023"

    def test_two_digit_fields(self):
        assert format_date(date(2021, 11, 30)) == "11/30/2021"

    def test_post_date_display(self):
        post = Post(title="t", filename="f", date=date(2024, 1, 9), content="")
        assert post.date_display == "1/9/2024"

    def test_summary_from_post(self):
        post = Post(title="T", filename="slug", date=date(2024, 1, 9), content="")
        summary = PostSummary.from_post(post, "/blog/")
        assert summary.link == "/blog/slug"
        assert summary.to_dict() == {"link": "/blog/slug", "title": "T", "date_display": "1/9/2024"}


class TestLoadPost:
    def test_load_existing_file(self, tmp_path: Path):
        path = tmp_path / "x.post"
        path.write_text("Title\n5/6/2021\n\n\nbody", encoding="utf-8")
        post = load_post(path, "x")
        assert post.filename == "x"
        assert post.date == date(2021, 5, 6)

    def test_missing_file_is_not_found(self, tmp_path: Path):
        with pytest.raises(PostNotFoundError) as exc_info:
            load_post(tmp_path / "missing.post", "missing")
        assert not isinstance(exc_info.value, MalformedPostError)

    def test_non_utf8_file_is_malformed(self, tmp_path: Path):
        path = tmp_path / "latin.post"
        path.write_bytes(b"Caf\xe9\n1/1/2023\n\n\nbody")
        with pytest.raises(MalformedPostError) as exc_info:
            load_post(path, "latin")
        assert exc_info.value.post_id == "latin"
        assert "UTF-8" in exc_info.value.reason

    def test_directory_is_not_found(self, tmp_path: Path):
        (tmp_path / "dir.post").mkdir()
        with pytest.raises(PostNotFoundError):
            load_post(tmp_path / "dir.post", "dir")
