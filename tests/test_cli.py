from pathlib import Path

import pytest

from cheetsheet import __version__
from cheetsheet.app.main import run


@pytest.fixture(autouse=True)
def _no_env_config_dir(monkeypatch) -> None:
    monkeypatch.delenv("CHEETSHEET_CONFIG_DIR", raising=False)


@pytest.mark.parametrize("flag", ["-h", "--help"])
def test_help(flag: str, capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        run([flag])

    assert excinfo.value.code == 0
    assert "usage" in capsys.readouterr().out.lower()


def test_version(capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        run(["--version"])

    assert excinfo.value.code == 0
    assert __version__ in capsys.readouterr().out


def test_missing_command_is_usage_error(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        run(["--config-dir", str(tmp_path)])

    assert excinfo.value.code == 2


def test_missing_sheet(tmp_path: Path, capsys) -> None:
    code = run(["nonexistent-cmd-xyz", "--config-dir", str(tmp_path)])

    assert code == 1
    err = capsys.readouterr().err
    assert err.startswith("Error: ")
    assert "No cheatsheet found for 'nonexistent-cmd-xyz'" in err


def test_found_sheet(tmp_path: Path, capsys) -> None:
    (tmp_path / "tmux.md").write_text(
        "# Tmux\n\n**prefix**: `Ctrl+b`\n\n```bash\ntmux new -s work\n```\n",
        encoding="utf-8",
    )

    code = run(["tmux", "--config-dir", str(tmp_path)])

    assert code == 0
    out = capsys.readouterr().out
    assert "Tmux" in out
    assert "work" in out


def test_list(tmp_path: Path, capsys) -> None:
    (tmp_path / "tmux.md").write_text("# tmux\n", encoding="utf-8")
    (tmp_path / "docker.md").write_text("# docker\n", encoding="utf-8")

    assert run(["--list", "--config-dir", str(tmp_path)]) == 0
    assert capsys.readouterr().out.splitlines() == ["docker", "tmux"]


def test_config_dir_from_environment(monkeypatch, tmp_path: Path, capsys) -> None:
    (tmp_path / "git.md").write_text("# git\n", encoding="utf-8")
    monkeypatch.setenv("CHEETSHEET_CONFIG_DIR", str(tmp_path))

    assert run(["--list"]) == 0
    assert capsys.readouterr().out.splitlines() == ["git"]
