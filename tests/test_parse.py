"""Tests for the treeish expression parser."""

import pytest

from treeish import GlobError, ParseError
from treeish.parse import (
    PartitionedGlob,
    PartitionedGlobIn,
    PartitionedPath,
    parse,
)


class TestSeparatedExpressions:
    """Expressions containing the `::` separator."""

    def test_path_and_glob(self):
        result = parse("/mnt/media::**/*.txt")
        assert isinstance(result, PartitionedGlobIn)
        assert result.path == "/mnt/media"
        assert result.glob.as_str() == "**/*.txt"

    def test_empty_path_is_discarded(self):
        result = parse("::**/*.txt")
        assert isinstance(result, PartitionedGlob)
        assert result.glob.as_str() == "**/*.txt"

    def test_rooted_glob_is_not_rejected_by_the_parser(self):
        result = parse("a/b::/x/*.txt")
        assert isinstance(result, PartitionedGlobIn)
        assert result.glob.has_root()

    def test_only_first_separator_splits(self):
        result = parse("a::b::c")
        assert isinstance(result, PartitionedGlobIn)
        assert result.path == "a"
        assert result.glob.as_str() == "b::c"

    def test_empty_glob_is_discarded(self):
        result = parse("a::")
        assert isinstance(result, PartitionedPath)
        assert result.path == "a"

    def test_separator_alone_is_nothing(self):
        assert parse("::") is None

    def test_bad_glob_after_separator_is_an_error(self):
        with pytest.raises(GlobError):
            parse("src::[abc")

    def test_prefix_is_not_read_as_a_glob(self):
        result = parse("dir[1]::*.txt")
        assert isinstance(result, PartitionedGlobIn)
        assert result.path == "dir[1]"

    def test_parts_borrow_from_expression(self):
        result = parse("/mnt/media::**/*.txt")
        assert result.path.is_borrowed()
        assert result.glob.is_borrowed()


class TestBareExpressions:
    """Expressions without a separator."""

    def test_glob_without_literal_prefix(self):
        result = parse("**/*.txt")
        assert isinstance(result, PartitionedGlob)
        assert result.glob.as_str() == "**/*.txt"

    def test_glob_with_literal_prefix(self):
        result = parse("/var/log/*.log")
        assert isinstance(result, PartitionedGlobIn)
        assert result.path == "/var/log"
        assert result.glob.as_str() == "*.log"

    def test_literal_glob_is_a_path(self):
        result = parse("/var/log/app.log")
        assert isinstance(result, PartitionedPath)
        assert result.path == "/var/log/app.log"

    def test_invalid_glob_falls_back_to_path(self):
        result = parse("[abc")
        assert isinstance(result, PartitionedPath)
        assert result.path == "[abc"

    def test_windows_path_falls_back_to_path(self):
        result = parse("C:\\Users\\me")
        assert isinstance(result, PartitionedPath)
        assert result.path == "C:\\Users\\me"

    def test_empty_expression(self):
        assert parse("") is None


class TestParseErrors:
    """The grammar cannot consume NUL characters."""

    def test_nul_in_path(self):
        with pytest.raises(ParseError) as info:
            parse("a\0b")
        assert info.value.expression == "a\0b"
        assert info.value.position == 1

    def test_nul_after_separator(self):
        with pytest.raises(ParseError) as info:
            parse("a::*.txt\0")
        assert info.value.position == 8

    def test_nul_alone(self):
        with pytest.raises(ParseError) as info:
            parse("\0")
        assert info.value.position == 0

    def test_non_string_rejected(self):
        with pytest.raises(TypeError):
            parse(b"*.txt")
