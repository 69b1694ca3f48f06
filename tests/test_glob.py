"""Tests for glob compilation, partitioning and matching."""

import pytest

from treeish import GlobError
from treeish.core.glob import Glob, compile_glob, unescape
from treeish.core.text import Borrowed


class TestCompile:
    """Glob.new accepts well-formed globs and rejects ambiguous ones."""

    @pytest.mark.parametrize("text", [
        "",
        "*.txt",
        "**/*.txt",
        "src/**",
        "/var/log/*.log",
        "file?.py",
        "[abc].txt",
        "[!abc].txt",
        "{foo,bar}/*.md",
        "a\\*b",
        "dir]",
        "a,b",
    ])
    def test_valid(self, text):
        assert Glob.new(text).as_str() == text

    @pytest.mark.parametrize("text, reason", [
        ("a\\", "unpaired escape"),
        ("[abc", "unclosed character class"),
        ("[]", "empty character class"),
        ("[a/b]", "separator in character class"),
        ("{a,b", "unclosed alternative"),
        ("a}", "unmatched '}'"),
        ("a**", "'**' must be a whole path component"),
        ("**b/c", "'**' must be a whole path component"),
        ("a/***/b", "too many adjacent '*'"),
        ("C:\\Users", "cannot escape 'U'"),
    ])
    def test_invalid(self, text, reason):
        with pytest.raises(GlobError) as info:
            Glob.new(text)
        assert info.value.reason == reason
        assert info.value.text == text

    def test_error_position(self):
        with pytest.raises(GlobError) as info:
            Glob.new("src/[abc")
        assert info.value.position == 4

    def test_compile_glob_returns_none_on_error(self):
        assert compile_glob("[abc") is None
        assert compile_glob("*.txt") == Glob.new("*.txt")

    def test_str_input_is_borrowed(self):
        assert Glob.new("*.txt").is_borrowed()


class TestPartition:
    """partition() splits off the literal path prefix."""

    @pytest.mark.parametrize("text, prefix, rest", [
        ("**/*.txt", "", "**/*.txt"),
        ("*.txt", "", "*.txt"),
        ("src/*.rs", "src", "*.rs"),
        ("/mnt/media/**/*.txt", "/mnt/media", "**/*.txt"),
        ("/*.log", "/", "*.log"),
        ("/var/log/app.log", "/var/log/app.log", ""),
        ("a/b/c", "a/b/c", ""),
        ("a/*/c", "a", "*/c"),
        ("a\\*b/*.txt", "a*b", "*.txt"),
        ("{a,b}/c", "", "{a,b}/c"),
    ])
    def test_partition(self, text, prefix, rest):
        path, glob = Glob.new(text).partition()
        assert path.as_str() == prefix
        assert glob.as_str() == rest

    def test_remainder_is_never_rooted_after_a_prefix(self):
        _, rest = Glob.new("/var/**/x").partition()
        assert not rest.has_root()

    def test_parts_borrow_from_source(self):
        source = Borrowed("tree::src/*.rs", 6)
        path, rest = Glob.new(source).partition()
        assert path.is_borrowed()
        assert rest.is_borrowed()
        assert rest.text.span == (10, 14)

    def test_unescaped_prefix_is_owned(self):
        path, _ = Glob.new("a\\*b/*.txt").partition()
        assert not path.is_borrowed()


class TestQueries:
    """Rootedness, emptiness and matching."""

    def test_has_root(self):
        assert Glob.new("/x/*.txt").has_root()
        assert not Glob.new("x/*.txt").has_root()
        assert not Glob.new("**/*.txt").has_root()

    def test_empty(self):
        assert Glob.new("").is_empty()
        assert Glob.empty().is_empty()
        assert not Glob.new("*").is_empty()

    def test_empty_glob_matches_everything(self):
        glob = Glob.empty()
        assert glob.is_match("")
        assert glob.is_match("any/path/at/all")

    def test_is_match(self):
        glob = Glob.new("**/*.txt")
        assert glob.is_match("file1.txt")
        assert glob.is_match("dir1/subdir1/file5.txt")
        assert not glob.is_match("file2.py")

    def test_star_stays_within_a_component(self):
        glob = Glob.new("*.txt")
        assert glob.is_match("a.txt")
        assert not glob.is_match("dir/a.txt")

    def test_alternatives(self):
        glob = Glob.new("{dir1,dir2}/*.txt")
        assert glob.is_match("dir1/file3.txt")
        assert glob.is_match("dir2/file6.txt")
        assert not glob.is_match("dir3/file.txt")

    def test_into_owned(self):
        glob = Glob.new("*.txt")
        owned = glob.into_owned()
        assert not owned.is_borrowed()
        assert owned == glob
        assert owned.into_owned() is owned
        assert owned.is_match("a.txt")

    def test_unescape(self):
        assert unescape("a\\*b\\[c") == "a*b[c"
