"""
Unit tests for warmpath/cli.py
"""

import json
import logging

import pytest

from warmpath.cli import build_parser, main


@pytest.fixture(autouse=True)
def restore_root_logging():
    """main() reconfigures the root logger; put it back afterwards."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def graph_file(tmp_path, alice, dana, erin, gina):
    document = {
        "profiles": [p.model_dump(mode="json") for p in (alice, dana, erin, gina)],
        "connections": [],
    }
    path = tmp_path / "graph.json"
    path.write_text(json.dumps(document), encoding="utf-8")
    return str(path)


class TestParser:
    """Tests for argument parsing."""

    def test_repeated_targets(self):
        args = build_parser().parse_args(["g.json", "--source", "a", "--target", "b", "--target", "c"])
        assert args.target == ["b", "c"]
        assert args.max_hops == 3
        assert args.compare is False

    def test_source_is_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["g.json", "--target", "b"])


class TestMain:
    """Tests for the CLI entry point."""

    def test_single_target(self, graph_file, capsys):
        assert main([graph_file, "--source", "alice", "--target", "dana"]) == 0

        output = json.loads(capsys.readouterr().out)
        assert output["type"] == "direct-similarity"
        assert output["confidence"] == pytest.approx(0.70)

    def test_batch(self, graph_file, capsys):
        code = main([graph_file, "--source", "alice", "--target", "gina", "--target", "erin"])

        assert code == 0
        output = json.loads(capsys.readouterr().out)
        assert [s["type"] for s in output] == ["cold-similarity"]

    def test_compare(self, graph_file, capsys):
        assert main([graph_file, "--source", "alice", "--target", "erin", "--compare"]) == 0
        output = json.loads(capsys.readouterr().out)
        assert [s["type"] for s in output] == ["cold-similarity"]

    def test_compare_rejects_batch(self, graph_file, capsys):
        code = main([graph_file, "--source", "alice", "--target", "dana", "--target", "erin", "--compare"])
        assert code == 1
        assert "--compare takes a single --target" in capsys.readouterr().err

    def test_unknown_target(self, graph_file, capsys):
        assert main([graph_file, "--source", "alice", "--target", "nobody"]) == 1
        assert "Target profile not found in graph: nobody" in capsys.readouterr().err

    def test_missing_graph_file(self, tmp_path, capsys):
        missing = str(tmp_path / "missing.json")
        assert main([missing, "--source", "alice", "--target", "dana"]) == 1
        assert "Error: " in capsys.readouterr().err
