# src/e2e/test_cli.py

import json
from pathlib import Path

import pytest

from essaysync.__main__ import main


def _seed(tmp: Path) -> Path:
    path = tmp / "submission.json"
    path.write_text(json.dumps({
        "_id": "cli-1",
        "body": "Reading helps. It builds focus.\nBooks are cheap.",
        "score": 7.0,
        "aiFeedback": {"improvedVersions": {
            "band8": {"introduction": "Reading is beneficial. It fosters focus.", "conclusion": "Books are affordable."},
        }},
    }), encoding="utf-8")
    return path


def test_split_json(capsys):
    assert main(["--split", "One. Two", "--json"]) == 0
    rows = json.loads(capsys.readouterr().out)
    assert [r["text"] for r in rows] == ["One.", "Two"]
    assert rows[1] == {"id": "sentence-1", "text": "Two", "index": 1}


def test_resolve(capsys):
    assert main(["--resolve", "improved-conclusion-sentence-2", "--container", "original-conclusion",
                 "--from-improved"]) == 0
    assert capsys.readouterr().out.strip() == "original-conclusion-sentence-2"
    assert main(["--resolve", "bogus", "--container", "original-intro"]) == 1


@pytest.mark.e2e
def test_compare_table_and_json(tmp_path: Path, capsys):
    path = _seed(tmp_path)
    assert main(["--compare", str(path), "--hover", "original-intro-sentence-1"]) == 0
    out = capsys.readouterr().out
    assert "band=8" in out and "It builds focus." in out and "*1" in out

    assert main(["--compare", str(path), "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["submission_id"] == "cli-1"
    assert [p["role"] for p in data["paragraphs"]] == ["intro", "conclusion"]


@pytest.mark.e2e
def test_compare_missing_file_exits_nonzero(tmp_path: Path):
    with pytest.raises(SystemExit) as exc:
        main(["--compare", str(tmp_path / "nope.json")])
    assert exc.value.code == 2


@pytest.mark.e2e
def test_draft_commands_with_sqlite(tmp_path: Path, capsys):
    essay = tmp_path / "essay.txt"
    essay.write_text("A draft essay.", encoding="utf-8")
    dsn = f"sqlite:///{tmp_path / 'drafts.sqlite'}"

    assert main(["--save-draft", str(essay), "--topic", "Reading", "--db", dsn]) == 0
    assert main(["--show-draft", "--db", dsn]) == 0
    assert "A draft essay." in capsys.readouterr().out
    assert main(["--clear-draft", "--db", dsn]) == 0
    assert main(["--show-draft", "--db", dsn]) == 0
    assert "(no draft)" in capsys.readouterr().out
