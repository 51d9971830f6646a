"""Unit tests for gitignore-style exclusion rules."""

from pathlib import Path

import pytest

from treewalk.exclusion_rules.git_rules import GitIgnoreExclusionRules


@pytest.fixture
def gitignore(tmp_path):
    path = tmp_path / ".gitignore"
    path.write_text("# generated files\n*.log\n!keep.log\nbuild/\n*.py[cod]\n**/__pycache__/\n")
    return path


@pytest.fixture
def custom_ignore(tmp_path):
    path = tmp_path / "custom.ignore"
    path.write_text("*.json\n!package.json\ndist/\n")
    return path


@pytest.mark.parametrize(
    "path,expected",
    [
        ("server.log", True),
        ("keep.log", False),
        ("logs/server.log", True),
        ("build/", True),
        ("build", False),
        ("build/out.js", True),
        ("src/build/", True),
        ("module.pyc", True),
        ("module.py", False),
        ("__pycache__/", True),
        ("src/__pycache__/", True),
        ("README.md", False),
    ],
)
def test_root_relative_paths(gitignore, path, expected):
    assert GitIgnoreExclusionRules(gitignore).exclude(path) == expected


def test_nonexistent_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        GitIgnoreExclusionRules(tmp_path / "missing")


def test_input_types(gitignore):
    assert GitIgnoreExclusionRules(str(gitignore)).exclude("a.log")
    assert GitIgnoreExclusionRules(Path(gitignore)).exclude("a.log")
    assert GitIgnoreExclusionRules([gitignore]).exclude("a.log")
    assert not GitIgnoreExclusionRules(None).exclude("a.log")
    assert not GitIgnoreExclusionRules([]).exclude("a.log")


def test_multiple_files(gitignore, custom_ignore):
    rules = GitIgnoreExclusionRules([gitignore, custom_ignore])

    assert rules.exclude("server.log")
    assert rules.exclude("config.json")
    assert not rules.exclude("package.json")
    assert rules.exclude("dist/")


def test_later_rules_win(tmp_path):
    first = tmp_path / "first"
    first.write_text("*.md\n!README.md\n")
    second = tmp_path / "second"
    second.write_text("README.md\n")

    assert GitIgnoreExclusionRules([first, second]).exclude("README.md")
    assert not GitIgnoreExclusionRules([second, first]).exclude("README.md")


def test_load_rules_incrementally(gitignore, custom_ignore):
    rules = GitIgnoreExclusionRules(gitignore)
    assert not rules.exclude("config.json")

    rules.load_rules(custom_ignore)

    assert rules.exclude("config.json")
    assert rules.exclude("server.log")


def test_add_rule_and_load_rules(gitignore):
    rules = GitIgnoreExclusionRules()
    rules.add_rule("*.md")
    rules.load_rules(gitignore)
    rules.add_rule("!keep.md")

    assert rules.exclude("notes.md")
    assert not rules.exclude("keep.md")
    assert rules.exclude("a.log")


def test_has_rules(gitignore, tmp_path):
    assert GitIgnoreExclusionRules(gitignore).has_rules()
    assert not GitIgnoreExclusionRules().has_rules()

    comments_only = tmp_path / "comments"
    comments_only.write_text("# nothing\n\n   \n")
    assert not GitIgnoreExclusionRules(comments_only).has_rules()


def test_comment_and_blank_rules_match_nothing():
    rules = GitIgnoreExclusionRules()
    rules.add_rule("")
    rules.add_rule("# This is a comment")

    assert not rules.exclude("file.txt")
    assert not rules.exclude("# This is a comment")
