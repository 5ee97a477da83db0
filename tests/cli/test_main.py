"""Test the nts command line entry point."""

from __future__ import annotations

import json
import pathlib
import typing as t

import pytest

from nts.__about__ import __version__
from nts.cli import cli, create_parser
from tests.helpers import make_working_copy, write_json_config

if t.TYPE_CHECKING:
    from tests.helpers import SvnCall


def test_help(capsys: pytest.CaptureFixture[str]) -> None:
    """``--help`` lists every command."""
    with pytest.raises(SystemExit) as excinfo:
        cli(["--help"])

    assert excinfo.value.code == 0
    stdout = capsys.readouterr().out
    assert "usage: nts" in stdout
    for command in ("list", "info", "generate", "update", "init"):
        assert command in stdout


def test_version(capsys: pytest.CaptureFixture[str]) -> None:
    """``--version`` prints the program version."""
    with pytest.raises(SystemExit) as excinfo:
        cli(["--version"])

    assert excinfo.value.code == 0
    assert capsys.readouterr().out.strip() == f"nts {__version__}"


def test_no_command_prints_help(capsys: pytest.CaptureFixture[str]) -> None:
    """Without a command the help is shown and nothing else happens."""
    cli([])

    assert "usage: nts" in capsys.readouterr().out


class ParserFixture(t.NamedTuple):
    """Fixture for global option parsing."""

    test_id: str
    argv: list[str]
    expected: dict[str, t.Any]


PARSER_FIXTURES: list[ParserFixture] = [
    ParserFixture(
        test_id="defaults",
        argv=["list"],
        expected={
            "config": "projects.json",
            "verbose": False,
            "color": "auto",
            "svn_bin": None,
        },
    ),
    ParserFixture(
        test_id="long-options",
        argv=["--config", "work.json", "--verbose", "--svn", "/opt/svn", "update"],
        expected={"config": "work.json", "verbose": True, "svn_bin": "/opt/svn"},
    ),
    ParserFixture(
        test_id="short-options",
        argv=["-c", "work.json", "-v", "info"],
        expected={"config": "work.json", "verbose": True},
    ),
    ParserFixture(
        test_id="generate-sample",
        argv=["generate", "sample"],
        expected={"subparser_name": "generate", "mode": "sample"},
    ),
    ParserFixture(
        test_id="generate-scan",
        argv=["generate"],
        expected={"subparser_name": "generate", "mode": None},
    ),
]


@pytest.mark.parametrize(
    list(ParserFixture._fields),
    PARSER_FIXTURES,
    ids=[fixture.test_id for fixture in PARSER_FIXTURES],
)
def test_parser(test_id: str, argv: list[str], expected: dict[str, t.Any]) -> None:
    """Global options are given before the command."""
    args = vars(create_parser().parse_args(argv))

    for key, value in expected.items():
        assert args[key] == value


@pytest.mark.parametrize(
    "argv",
    [["generate", "bogus"], ["frobnicate"]],
    ids=["bad-generate-mode", "unknown-command"],
)
def test_usage_errors_exit_2(
    argv: list[str],
    capsys: pytest.CaptureFixture[str],
) -> None:
    """argparse rejects malformed invocations with exit code 2."""
    with pytest.raises(SystemExit) as excinfo:
        cli(argv)

    assert excinfo.value.code == 2
    assert "invalid choice" in capsys.readouterr().err


def test_list(
    work_path: pathlib.Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """``nts list`` prints one line per project."""
    write_json_config(
        work_path / "projects.json",
        {"alpha": {"url": "svn://a"}, "beta": {"url": "svn://b"}},
    )

    cli(["list"])

    assert capsys.readouterr().out.splitlines() == ["info: + alpha", "info: + beta"]


def test_list_verbose(
    work_path: pathlib.Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """``nts -v list`` pretty prints the whole configuration."""
    config = {"alpha": {"url": "svn://a", "notes": "keep"}}
    write_json_config(work_path / "projects.json", config)

    cli(["-v", "list"])

    assert capsys.readouterr().out == f"info: {json.dumps(config, indent=4)}\n"


def test_list_custom_config_from_home(
    user_path: pathlib.Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """``-c`` names a file that is also looked up in the home directory."""
    write_json_config(user_path / "work.json", {"gamma": {"url": "svn://g"}})

    cli(["-c", "work.json", "list"])

    assert capsys.readouterr().out == "info: + gamma\n"


@pytest.mark.parametrize(
    "command",
    ["list", "info", "update", "init"],
)
def test_missing_config_exits_1(
    command: str,
    work_path: pathlib.Path,
    user_path: pathlib.Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """A missing config is reported with both searched paths."""
    with pytest.raises(SystemExit) as excinfo:
        cli([command])

    assert excinfo.value.code == 1
    stderr = capsys.readouterr().err
    assert "error: Unable to find configuration file in " in stderr
    assert str(work_path / "projects.json") in stderr
    assert str(user_path / "projects.json") in stderr


def test_malformed_config_exits_1(
    work_path: pathlib.Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """A config that is not valid JSON is an error."""
    (work_path / "projects.json").write_text("{not json", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        cli(["list"])

    assert excinfo.value.code == 1
    assert "error: " in capsys.readouterr().err


def test_generate_sample_then_list(
    work_path: pathlib.Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """The sample can be listed straight away."""
    cli(["generate", "sample"])

    written = json.loads((work_path / "projects.json").read_text(encoding="utf-8"))
    assert written == {
        "project A": {
            "url": "https://subversion.example.com/repo/trunk",
            "notes": "replace me!",
        },
    }
    assert capsys.readouterr().out == ""

    cli(["list"])

    assert capsys.readouterr().out == "info: + project A\n"


def test_generate_sample_verbose(
    work_path: pathlib.Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Verbose generation confirms the file name."""
    cli(["-v", "-c", "sample.json", "generate", "sample"])

    assert (work_path / "sample.json").is_file()
    assert capsys.readouterr().out == (
        "success: Wrote config to file: sample.json\n"
    )


def test_update_with_svn_option(
    fake_svn: pathlib.Path,
    work_path: pathlib.Path,
    svn_calls: t.Callable[[], list[SvnCall]],
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Per-project failures are reported but do not change the exit status."""
    make_working_copy(work_path, "alpha")
    make_working_copy(work_path, "beta", broken=True)
    write_json_config(
        work_path / "projects.json",
        {"alpha": {"url": "svn://a"}, "beta": {"url": "svn://b"}},
    )

    cli(["--svn", str(fake_svn), "update"])

    captured = capsys.readouterr()
    assert captured.out == "success: alpha: updated successfully.\n"
    assert "error: beta: failed to update!" in captured.err
    assert sorted(call.cwd.name for call in svn_calls()) == ["alpha", "beta"]


def test_init_with_svn_env(
    fake_svn: pathlib.Path,
    work_path: pathlib.Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """``$NTS_SVN`` selects the svn executable."""
    monkeypatch.setenv("NTS_SVN", str(fake_svn))
    write_json_config(work_path / "projects.json", {"alpha": {"url": "svn://a"}})

    cli(["init"])

    assert (work_path / "alpha" / ".svn").is_dir()
    assert capsys.readouterr().out == "success: alpha: checked out successfully.\n"


def test_info_empty_config(
    work_path: pathlib.Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """An empty config runs nothing."""
    write_json_config(work_path / "projects.json", {})

    cli(["info"])

    assert capsys.readouterr().out == "info: No projects configured.\n"


def test_generate_scans_working_copies(
    fake_svn: pathlib.Path,
    work_path: pathlib.Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """``nts generate`` writes a config for the working copies it finds."""
    make_working_copy(work_path, "beta", url="https://svn.example.com/beta")
    make_working_copy(work_path, "alpha", url="https://svn.example.com/alpha")

    cli(["--svn", str(fake_svn), "-c", "found.json", "generate"])

    written = json.loads((work_path / "found.json").read_text(encoding="utf-8"))
    assert written == {
        "alpha": {"url": "https://svn.example.com/alpha"},
        "beta": {"url": "https://svn.example.com/beta"},
    }
    assert capsys.readouterr().err == ""

    cli(["-c", "found.json", "list"])

    assert capsys.readouterr().out == "info: + alpha\ninfo: + beta\n"


def test_generate_without_working_copies(
    work_path: pathlib.Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Nothing is written when there is nothing to describe."""
    cli(["generate"])

    assert not (work_path / "projects.json").exists()
    assert "error: No svn working copies found in" in capsys.readouterr().err
