import io
from pathlib import Path

import pytest

from apps.cli import play, replay


def _lexicon(tmp_path: Path) -> Path:
    p = tmp_path / "lexicon.txt"
    p.write_text("silent\ntin\ninlet\n", encoding="utf-8")
    return p


def _start(tmp_path: Path) -> Path:
    p = tmp_path / "start.txt"
    p.write_text("listen\n", encoding="utf-8")
    return p


def test_play_smoke(tmp_path: Path):
    out = io.StringIO()
    stdin = io.StringIO("silent\nsilent\n:words\n:reset\ntin\n:quit\n")
    rc = play.main(["--start-words", str(_start(tmp_path)), "--dictionary", "lexicon",
                    "--lexicon", str(_lexicon(tmp_path))], stdin=stdin, stdout=out)
    text = out.getvalue()
    assert rc == 0
    assert "Root word: LISTEN" in text
    assert "+6 silent" in text
    assert "Word used already: Be more original" in text
    assert "Final score: 3" in text


def test_play_missing_start_words(tmp_path: Path):
    rc = play.main(["--start-words", str(tmp_path / "nope.txt"), "--dictionary", "lexicon",
                    "--lexicon", str(_lexicon(tmp_path))], stdin=io.StringIO(""), stdout=io.StringIO())
    assert rc == 2


def test_replay_smoke(tmp_path: Path):
    cands = tmp_path / "cands.txt"
    cands.write_text("silent\nit\ninlet\n", encoding="utf-8")
    outdir = tmp_path / "reports"
    rc = replay.main(["--start-words", str(_start(tmp_path)), "--dictionary", "lexicon",
                      "--lexicon", str(_lexicon(tmp_path)), "--candidates", str(cands),
                      "--outdir", str(outdir), "--no-progress"])
    assert rc == 0
    assert len(list(outdir.glob("replay_*.csv"))) == 1
    assert len(list(outdir.glob("replay_*_manifest.json"))) == 1


def test_play_rejects_non_positive_min_zipf(tmp_path: Path):
    with pytest.raises(SystemExit) as exc:
        play.main(["--start-words", str(_start(tmp_path)), "--min-zipf", "0"],
                  stdin=io.StringIO(""), stdout=io.StringIO())
    assert exc.value.code == 2


def test_play_unreadable_lexicon(tmp_path: Path):
    rc = play.main(["--start-words", str(_start(tmp_path)), "--dictionary", "lexicon",
                    "--lexicon", str(tmp_path)], stdin=io.StringIO(""), stdout=io.StringIO())
    assert rc == 2


def test_replay_unusable_root(tmp_path: Path):
    cands = tmp_path / "cands.txt"
    cands.write_text("silent\n", encoding="utf-8")
    rc = replay.main(["--root", "it", "--dictionary", "lexicon", "--lexicon", str(_lexicon(tmp_path)),
                      "--candidates", str(cands), "--outdir", str(tmp_path / "reports"),
                      "--no-progress"])
    assert rc == 2
    assert not (tmp_path / "reports").exists()


def test_replay_forced_root_skips_list_summary(tmp_path: Path, capsys):
    cands = tmp_path / "cands.txt"
    cands.write_text("silent\ntin\n", encoding="utf-8")
    rc = replay.main(["--root", "Listen", "--start-words", str(tmp_path / "missing.txt"),
                      "--dictionary", "lexicon", "--lexicon", str(_lexicon(tmp_path)),
                      "--candidates", str(cands), "--outdir", str(tmp_path / "reports"),
                      "--no-progress"])
    out = capsys.readouterr().out
    assert rc == 0
    assert "start_words=" not in out
    assert "Root word: listen | score 9" in out
