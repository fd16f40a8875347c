from rustdrill import ui


def test_no_emoji_follows_environment(monkeypatch):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    assert ui.no_emoji() is False
    monkeypatch.setenv("NO_EMOJI", "1")
    assert ui.no_emoji() is True


def test_warn_without_emoji(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    ui.warn("Ran exercise with errors")
    assert capsys.readouterr().out == "! Ran exercise with errors\n"


def test_success_without_emoji(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    ui.success("Successfully ran exercise")
    assert capsys.readouterr().out == "✓ Successfully ran exercise\n"


def test_emoji_marks(monkeypatch, capsys):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    ui.warn("careful")
    ui.success("nice")
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("⚠️")
    assert lines[0].endswith(" careful")
    assert lines[1] == "✅ nice"