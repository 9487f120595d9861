import run_summary
from tests.conftest import FakeClipboard, ScriptedLLM


def _patch(monkeypatch, llm, clipboard):
    monkeypatch.setattr(run_summary, "OpenAIClient", lambda **kwargs: llm)
    monkeypatch.setattr("textsum.commands.Clipboard", lambda: clipboard)


def test_summarizes_file_and_copies_result(monkeypatch, tmp_path, capsys):
    llm = ScriptedLLM(["s1", "s2"])
    clipboard = FakeClipboard()
    _patch(monkeypatch, llm, clipboard)
    path = tmp_path / "talk.txt"
    path.write_text("w" * 150, encoding="utf-8")

    code = run_summary.main(["--file", str(path), "--nch", "100", "--summary-block", "50", "-q"])

    assert code == 0
    assert clipboard.writes == ["s1 s2"]
    assert "s1 s2" in capsys.readouterr().out


def test_bullets_from_clipboard(monkeypatch, capsys):
    llm = ScriptedLLM(["- a"])
    clipboard = FakeClipboard("copied text")
    _patch(monkeypatch, llm, clipboard)

    assert run_summary.main(["--bullets", "3", "--model", "gpt-4", "-q"]) == 0
    assert llm.calls[0]["model"] == "gpt-4-0613"
    assert clipboard.writes == ["- a"]


def test_invalid_options_exit_with_error(monkeypatch, capsys):
    _patch(monkeypatch, ScriptedLLM(), FakeClipboard("text"))

    assert run_summary.main(["--nch", "10", "--summary-block", "20", "-q"]) == 1
    assert "Error" in capsys.readouterr().err


def test_missing_file_exits_with_error(monkeypatch, tmp_path, capsys):
    _patch(monkeypatch, ScriptedLLM(), FakeClipboard())

    assert run_summary.main(["--file", str(tmp_path / "missing.txt"), "-q"]) == 1
    assert "Error" in capsys.readouterr().err


def test_unsupported_file_exits_with_error(monkeypatch, tmp_path, capsys):
    _patch(monkeypatch, ScriptedLLM(), FakeClipboard())
    path = tmp_path / "image.png"
    path.write_bytes(b"\x89PNG")

    assert run_summary.main(["--file", str(path), "-q"]) == 1
    assert "Unsupported" in capsys.readouterr().err
