"""Test configuration and fixtures for treewalk."""

import pytest


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


@pytest.fixture
def sample_tree(tmp_path):
    """Create a small project directory.

    Layout (hidden entries included)::

        .hidden
        a.txt
        b.log
        docs/README.md
        src/main.py
        src/util/helper.py
    """
    (tmp_path / "docs").mkdir()
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "util").mkdir()

    (tmp_path / ".hidden").write_text("secret\n")
    (tmp_path / "a.txt").write_text("alpha\n")
    (tmp_path / "b.log").write_text("DEBUG: test log\n")
    (tmp_path / "docs" / "README.md").write_text("# Test Project\n")
    (tmp_path / "src" / "main.py").write_text("def main():\n    print('Hello')\n")
    (tmp_path / "src" / "util" / "helper.py").write_text("def helper():\n    pass\n")
    return tmp_path
