"""Tests for output reporters."""

import json

import yaml
from rich.console import Console

from porcelain.git.status_parser import parse_status_summary
from porcelain.git.models import StatusSummary
from porcelain.output import json_report, terminal, yaml_report


class TestJsonReport:
    def test_valid_json(self, status_mixed):
        data = json.loads(json_report.render(parse_status_summary(status_mixed)))
        assert data["current"] == "feature/login"
        assert data["tracking"] == "origin/feature/login"
        assert data["ahead"] == 2
        assert data["behind"] == 1
        assert data["is_clean"] is False
        assert data["not_added"] == ["scratch.txt"]

    def test_rename_shape(self, status_mixed):
        data = json_report.to_dict(parse_status_summary(status_mixed))
        assert data["renamed"] == [{"from": "docs/old_guide.md", "to": "docs/guide.md"}]
        renamed_entry = [f for f in data["files"] if f["index"] == "R"][0]
        assert renamed_entry == {
            "path": "docs/guide.md",
            "index": "R",
            "working_dir": " ",
            "from": "docs/old_guide.md",
        }

    def test_plain_file_has_no_from(self, status_mixed):
        data = json_report.to_dict(parse_status_summary(status_mixed))
        assert "from" not in data["files"][0]

    def test_ignored_null_until_seen(self, status_clean, status_ignored):
        assert json_report.to_dict(parse_status_summary(status_clean))["ignored"] is None
        data = json_report.to_dict(parse_status_summary(status_ignored))
        assert data["ignored"] == ["build/", "debug.log"]

    def test_empty_result(self):
        data = json.loads(json_report.render(StatusSummary()))
        assert data["files"] == []
        assert data["is_clean"] is True
        assert data["current"] is None


class TestYamlReport:
    def test_matches_json_document(self, status_conflicts):
        summary = parse_status_summary(status_conflicts)
        assert yaml.safe_load(yaml_report.render(summary)) == json_report.to_dict(summary)


class TestTerminal:
    def _render(self, summary, **kwargs) -> str:
        console = Console(record=True, width=120)
        terminal.render(summary, console=console, **kwargs)
        return console.export_text()

    def test_clean_tree(self, status_clean):
        text = self._render(parse_status_summary(status_clean))
        assert "On branch main" in text
        assert "origin/main" in text
        assert "working tree clean" in text

    def test_file_table(self, status_mixed):
        text = self._render(parse_status_summary(status_mixed))
        assert "scratch.txt" in text
        assert "docs/old_guide.md → docs/guide.md" in text
        assert "Staged:" in text

    def test_hide_branch_and_summary(self, status_mixed):
        text = self._render(
            parse_status_summary(status_mixed), show_branch=False, show_summary=False
        )
        assert "On branch" not in text
        assert "Staged:" not in text

    def test_detached_marker(self):
        summary = parse_status_summary("## HEAD (no branch)\0")
        assert "detached HEAD" in terminal.branch_line(summary)

    def test_markup_in_path_is_literal(self):
        summary = parse_status_summary("?? [bold]notes[/bold].txt\0")
        text = self._render(summary)
        assert "[bold]notes[/bold].txt" in text
