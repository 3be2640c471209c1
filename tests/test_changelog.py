import os

from core.version import __version__


def test_changelog_has_entries():
    root = os.path.dirname(os.path.dirname(__file__))
    changelog = os.path.join(root, "CHANGELOG.md")
    assert os.path.exists(changelog), "CHANGELOG.md should exist"
    with open(changelog, encoding="utf-8") as f:
        lines = f.readlines()
    entries = [line for line in lines if line.strip().startswith("- ")]
    assert entries, "CHANGELOG.md should contain at least one bullet entry"
    assert any(__version__ in line for line in lines if line.startswith("## "))
