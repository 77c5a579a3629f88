from pathlib import Path

import pytest

from cobalt.errors import ConfigError
from cobalt.source import Source, SourcePath


@pytest.mark.parametrize(
    "root, ignores, target, included",
    [
        ("/usr/cobalt/site", [], "/usr/cobalt/site", True),
        ("./", [], "./", True),
        ("/usr/cobalt/site", [], "/usr/cobalt/site/child", True),
        ("./", [], "./child", True),
    ],
)
def test_includes_dir(root, ignores, target, included):
    assert Source(root, ignores).includes_dir(target) is included


@pytest.mark.parametrize(
    "root, ignores, target, included",
    [
        ("/usr/cobalt/site", [], "/usr/cobalt/site/child.txt", True),
        ("./", [], "./child.txt", True),
        ("/usr/cobalt/site", [".*"], "/usr/cobalt/site/.child.txt", False),
        ("/tmp/.foo/cobalt/site", [".*"], "/tmp/.foo/cobalt/site/child.txt", True),
        ("/usr/cobalt/site", [], "/usr/cobalt/site/child/child.txt", True),
        ("./", [], "./child/child.txt", True),
    ],
)
def test_includes_file(root, ignores, target, included):
    assert Source(root, ignores).includes_file(target) is included


def test_file_in_ignored_dir_is_excluded():
    source = Source("/site", ["build/"])
    assert source.includes_file("/site/build/out.html") is False
    assert source.includes_file("/site/build") is True
    assert source.includes_dir("/site/build") is False


def test_negation_whitelists():
    source = Source("/site", [".*", "!.keep"])
    assert source.includes_file("/site/.keep") is True
    assert source.includes_file("/site/.other") is False


def test_anchored_pattern():
    source = Source("/site", ["/top.md"])
    assert source.includes_file("/site/top.md") is False
    assert source.includes_file("/site/sub/top.md") is True


def test_comments_and_blank_lines_are_skipped():
    source = Source("/site", ["# comment", "", "   "])
    assert source.includes_file("/site/# comment") is True


def test_invalid_ignore_entry():
    with pytest.raises(ConfigError):
        Source("/site", ["[abc"])


def test_outside_absolute_path_rejected():
    with pytest.raises(ValueError):
        Source("/site", []).includes_file("/elsewhere/file.md")


def _touch(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("x")


def test_iter_walks_sorted_and_filtered(tmp_path):
    for rel in ["z.txt", "a.md", "b/c.md", ".hidden/x.md", ".secret.md", "b/a.md"]:
        _touch(tmp_path / rel)
    found = [str(p.rel_path) for p in Source(tmp_path, [".*"])]
    assert found == ["a.md", "b/a.md", "b/c.md", "z.txt"]


def test_iter_abs_paths_match_rel_paths(tmp_path):
    _touch(tmp_path / "d" / "e.md")
    (found,) = list(Source(tmp_path, []))
    assert found.abs_path == tmp_path / "d" / "e.md"
    assert found.rel_path == "d/e.md"


def test_iter_globstar_and_dir_only(tmp_path):
    for rel in ["docs/a.md", "docs/deep/b.md", "build/out.md", "other/build", "keep.md"]:
        _touch(tmp_path / rel)
    found = [str(p.rel_path) for p in Source(tmp_path, ["docs/**", "build/"])]
    assert found == ["keep.md", "other/build"]


def test_source_path_from_root():
    path = SourcePath.from_root(Path("/r"), Path("/r/a/b.md"))
    assert path.abs_path == Path("/r/a/b.md")
    assert path.rel_path == "a/b.md"
    assert SourcePath.from_root(Path("/r"), Path("/other/b.md")) is None


def test_source_path_pop_and_push():
    path = SourcePath.from_root(Path("/r"), Path("/r/a/b.md"))
    assert path.pop() is True
    assert path.abs_path == Path("/r/a")
    assert path.rel_path.as_str() == "a"
    path.push("c.md")
    assert path.abs_path == Path("/r/a/c.md")
    assert path.rel_path.as_str() == "a/c.md"


def test_source_path_pop_out_of_step():
    path = SourcePath.from_root(Path("/r"), Path("/r/a"))
    assert path.pop() is True
    assert path.rel_path.as_str() == ""
    with pytest.raises(RuntimeError):
        path.pop()