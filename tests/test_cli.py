import json
from pathlib import Path

from typer.testing import CliRunner

from wordlint.cli import app

runner = CliRunner()

TEXT = "However, the plan failed. However, we tried again."


def _write(tmp_path: Path, name: str, text: str) -> Path:
    path = tmp_path / name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def test_cli_check_reports_lint_lines(tmp_path: Path):
    """check prints one lint line per pair and exits 1 when repetition is found."""
    path = _write(tmp_path, "doc.txt", TEXT)
    result = runner.invoke(app, ["check", "--input-path", str(path)])
    assert result.exit_code == 1
    assert result.stdout.strip() == "doc.txt:1:1:1:27:4:However,"


def test_cli_check_clean_file_exits_zero(tmp_path: Path):
    path = _write(tmp_path, "clean.txt", "Nothing repeats in this sentence.")
    result = runner.invoke(app, ["check", "--input-path", str(path)])
    assert result.exit_code == 0
    assert result.stdout.strip() == ""


def test_cli_check_json_output(tmp_path: Path):
    path = _write(tmp_path, "doc.txt", TEXT)
    result = runner.invoke(
        app, ["check", "--input-path", str(path), "--format", "json"]
    )
    assert result.exit_code == 1
    payload = json.loads(result.stdout)
    doc = payload["documents"][0]
    assert doc["doc_id"] == "doc.txt"
    assert doc["mode"] == "word"
    assert doc["pairs"][0]["distance"] == 4
    assert doc["pairs"][0]["second"] == {"line": 1, "column": 27, "position": 5}


def test_cli_check_human_output_in_percentage_mode(tmp_path: Path):
    path = _write(tmp_path, "doc.txt", TEXT)
    result = runner.invoke(
        app,
        [
            "check",
            "--input-path",
            str(path),
            "-f",
            "human",
            "-t",
            "percentage",
            "-d",
            "60",
        ],
    )
    assert result.exit_code == 1
    assert "'However,' at line 1, column 1 repeats at line 1, column 27" in result.stdout
    assert "50.00 % of document apart" in result.stdout


def test_cli_check_blacklist_file(tmp_path: Path):
    path = _write(tmp_path, "doc.txt", TEXT)
    blacklist = _write(tmp_path, "ignore.txt", "however\n")
    result = runner.invoke(
        app,
        [
            "check",
            "--input-path",
            str(path),
            "--strip-punctuation",
            "--lowercase",
            "--blacklist",
            str(blacklist),
        ],
    )
    assert result.exit_code == 0


def test_cli_check_directory_uses_config(tmp_path: Path):
    corpus = tmp_path / "corpus"
    _write(corpus, "chapter1.txt", TEXT)
    _write(corpus, "notes/draft.md", "Again and again and again.")
    _write(corpus, "script.py", "again again again")
    config = _write(tmp_path, "wordlint.yaml", "match_length: 2\nlowercase: true\n")
    result = runner.invoke(
        app, ["check", "--input-path", str(corpus), "--config", str(config)]
    )
    assert result.exit_code == 1
    lines = result.stdout.strip().splitlines()
    assert lines[0].startswith("chapter1.txt:")
    assert "notes/draft.md:1:7:1:17:2:and" in lines
    assert not any(line.startswith("script.py") for line in lines)


def test_cli_rejects_unknown_format(tmp_path: Path):
    path = _write(tmp_path, "doc.txt", TEXT)
    result = runner.invoke(app, ["check", "--input-path", str(path), "-f", "xml"])
    assert result.exit_code not in (0, 1)


def test_cli_print_config():
    """print-config command dumps the default configuration values."""
    result = runner.invoke(app, ["print-config"])
    assert result.exit_code == 0
    assert "match_length" in result.stdout


def test_cli_lint_line_keeps_colons_in_lemma(tmp_path: Path):
    """The lemma is the last field so colons inside it do not shift the columns."""
    path = _write(tmp_path, "notes.txt", "Remember: lunch. Remember: dinner.")
    result = runner.invoke(app, ["check", "--input-path", str(path)])
    assert result.exit_code == 1
    fields = result.stdout.strip().split(":", 6)
    assert fields == ["notes.txt", "1", "1", "1", "18", "2", "Remember:"]


def test_cli_output_format_from_config_is_case_insensitive(tmp_path: Path):
    path = _write(tmp_path, "doc.txt", TEXT)
    config = _write(tmp_path, "wordlint.yaml", "output_format: JSON\n")
    result = runner.invoke(
        app, ["check", "--input-path", str(path), "--config", str(config)]
    )
    assert result.exit_code == 1
    assert json.loads(result.stdout)["documents"][0]["doc_id"] == "doc.txt"
