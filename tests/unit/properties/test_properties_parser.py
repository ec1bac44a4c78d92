"""Tests for the .properties text parser and file readers."""
from __future__ import annotations

from pathlib import Path

import pytest

from plugconf.core.exceptions import ReadFailureError
from plugconf.core.properties import parse_properties, read_properties_file, read_text_file


class TestParseProperties:
    def test_separators_comments_and_blank_lines(self) -> None:
        text = (
            "key1=value1\n"
            "key2 : value2\n"
            "key3 value3\n"
            "# hash comment\n"
            "! bang comment\n"
            "   \n"
            "   # indented comment\n"
            "key4\n"
        )
        assert parse_properties(text) == {
            "key1": "value1",
            "key2": "value2",
            "key3": "value3",
            "key4": "",
        }

    def test_value_keeps_trailing_whitespace_and_later_separators(self) -> None:
        assert parse_properties("url = http://host:80/a=b  \n") == {"url": "http://host:80/a=b  "}

    def test_only_one_separator_is_consumed(self) -> None:
        assert parse_properties("a==b\n") == {"a": "=b"}
        assert parse_properties("a = : b\n") == {"a": ": b"}

    def test_later_keys_overwrite_earlier_ones(self) -> None:
        assert parse_properties("k=1\nk=2\n") == {"k": "2"}

    def test_line_continuation(self) -> None:
        text = "fruits = apple, \\\n    banana, \\\n    cherry\nnext=1\n"
        assert parse_properties(text) == {"fruits": "apple, banana, cherry", "next": "1"}

    def test_continuation_line_is_never_a_comment(self) -> None:
        assert parse_properties("a=1,\\\n#2\n") == {"a": "1,#2"}

    def test_even_number_of_backslashes_does_not_continue(self) -> None:
        assert parse_properties("path=c:\\\\\nnext=1\n") == {"path": "c:\\", "next": "1"}

    def test_continuation_at_end_of_input(self) -> None:
        assert parse_properties("a=x\\") == {"a": "x"}

    def test_escapes(self) -> None:
        text = r"tab=a\tb" + "\n" + r"nl=a\nb" + "\n" + r"other=\q\\" + "\n"
        assert parse_properties(text) == {"tab": "a\tb", "nl": "a\nb", "other": "q\\"}

    def test_unicode_escapes(self) -> None:
        assert parse_properties(r"word=\u00e9t\u00E9") == {"word": "été"}

    def test_escaped_separators_in_key(self) -> None:
        assert parse_properties(r"a\=b=c") == {"a=b": "c"}
        assert parse_properties(r"a\:b:c") == {"a:b": "c"}
        assert parse_properties(r"my\ key=v") == {"my key": "v"}

    @pytest.mark.parametrize("line", [r"bad=\u12", r"bad=\uZZZZ"])
    def test_malformed_unicode_escape_raises(self, line: str) -> None:
        with pytest.raises(ValueError):
            parse_properties(line)

    def test_crlf_and_cr_line_endings(self) -> None:
        assert parse_properties("a=1\r\nb=2\rc=3") == {"a": "1", "b": "2", "c": "3"}

    def test_empty_text(self) -> None:
        assert parse_properties("") == {}


class TestReadFiles:
    def test_read_properties_file_latin1(self, tmp_path: Path) -> None:
        path = tmp_path / "latin.properties"
        path.write_bytes("name=caf\u00e9\n".encode("iso-8859-1"))
        assert read_properties_file(path) == {"name": "café"}

    def test_read_properties_file_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "utf8.properties"
        path.write_bytes("name=caf\u00e9\n".encode("utf-8"))
        assert read_properties_file(path, encoding="utf-8") == {"name": "café"}

    def test_missing_file_raises_read_failure(self, tmp_path: Path) -> None:
        missing = tmp_path / "missing.properties"
        with pytest.raises(ReadFailureError) as excinfo:
            read_properties_file(missing)
        assert excinfo.value.context["resource"] == str(missing)
        assert "FileNotFoundError" in excinfo.value.context["cause"]

    def test_undecodable_file_raises_read_failure(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.properties"
        path.write_bytes(b"k=\xff\xfe\n")
        with pytest.raises(ReadFailureError):
            read_properties_file(path, encoding="utf-8")

    def test_malformed_escape_raises_read_failure(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.properties"
        path.write_text(r"k=\uXYZ1", encoding="utf-8")
        with pytest.raises(ReadFailureError) as excinfo:
            read_properties_file(path)
        assert excinfo.value.to_json_error()["code"] == "ReadFailureError"

    def test_read_text_file_keeps_content_verbatim(self, tmp_path: Path) -> None:
        path = tmp_path / "rule.yaml"
        path.write_bytes(b"key: value\r\nother: 1\n")
        assert read_text_file(path) == "key: value\r\nother: 1\n"
