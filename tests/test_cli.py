import io

import pytest

from yamdoc.cli.main import VERSION, YamDocCLI


@pytest.fixture
def values_file(tmp_path):
    path = tmp_path / "values.yaml"
    path.write_text("# Number of pods\nreplicas: 3\nimage:\n  registry: docker.io\n", encoding="utf-8")
    return path


def test_renders_markdown_to_stdout(values_file, capsys):
    assert YamDocCLI().run([str(values_file)]) == 0

    out = capsys.readouterr().out
    assert "| Name | Value | Description |" in out
    assert "| replicas | 3 | Number of pods |" in out
    assert "| image.registry | docker.io |  |" in out


def test_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("name: truman\n"))

    assert YamDocCLI().run(["-"]) == 0
    assert "| name | truman |  |" in capsys.readouterr().out


def test_empty_document_prints_nothing(tmp_path, capsys):
    path = tmp_path / "empty.yaml"
    path.write_text("# just a comment\n", encoding="utf-8")

    assert YamDocCLI().run([str(path)]) == 0
    assert capsys.readouterr().out == ""


def test_writes_output_file(values_file, tmp_path):
    target = tmp_path / "VALUES.md"

    assert YamDocCLI().run([str(values_file), "-o", str(target)]) == 0
    assert "| replicas | 3 | Number of pods |" in target.read_text(encoding="utf-8")


def test_table_view(values_file, capsys):
    assert YamDocCLI().run([str(values_file), "--table"]) == 0

    out = capsys.readouterr().out
    assert "image.registry" in out
    assert "docker.io" in out


def test_parse_error_exits_non_zero(tmp_path, capsys):
    path = tmp_path / "bad.yaml"
    path.write_text("a: &anchor 1\nb: *anchor\n", encoding="utf-8")

    assert YamDocCLI().run([str(path)]) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Error" in captured.err


def test_malformed_yaml_exits_non_zero(tmp_path, capsys):
    path = tmp_path / "bad.yaml"
    path.write_text("key: [1, 2\nother: 3\n", encoding="utf-8")

    assert YamDocCLI().run([str(path)]) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "invalid YAML syntax" in captured.err


def test_lenient_booleans_flag(tmp_path, capsys):
    path = tmp_path / "flags.yaml"
    path.write_text("debug: True\n", encoding="utf-8")

    assert YamDocCLI().run([str(path)]) == 1
    capsys.readouterr()

    assert YamDocCLI().run([str(path), "--lenient-booleans"]) == 0
    assert "| debug | true |" in capsys.readouterr().out


def test_missing_file_exits_non_zero(tmp_path, capsys):
    assert YamDocCLI().run([str(tmp_path / "missing.yaml")]) == 1
    assert "failed to read file" in capsys.readouterr().err


def test_version(capsys):
    with pytest.raises(SystemExit) as exc:
        YamDocCLI().run(["--version"])

    assert exc.value.code == 0
    assert f"yamdoc v{VERSION}" in capsys.readouterr().out
