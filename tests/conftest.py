"""Shared pytest fixtures: a fake ``svn`` executable recording its calls."""

from __future__ import annotations

import pathlib
import stat
import sys
import textwrap
import typing as t

import pytest

from tests.helpers import SvnCall, read_svn_log


FAKE_SVN = textwrap.dedent(
    """\
    #!/bin/sh
    # Records "<cwd>|<args>" to $NTS_FAKE_SVN_LOG and mimics svn output.
    #
    # A working copy behaves according to marker files in its .svn directory:
    #   .svn/broken  error on stderr, exit 1
    #   .svn/warn    warning on stderr, exit 0
    #   .svn/url     repository url reported by `info`
    #   .svn/longline  one 200000 byte line before the `update` output
    # A checkout fails when its url contains "broken".
    printf '%s|%s\\n' "$(pwd -P)" "$*" >> "$NTS_FAKE_SVN_LOG"
    cmd="$1"
    case "$cmd" in
      checkout)
        case "$2" in
          *broken*)
            echo "svn: E170000: URL '$2' doesn't exist" >&2
            exit 1
            ;;
        esac
        mkdir -p "$3/.svn"
        echo "$2" > "$3/.svn/url"
        echo "A    $3/README"
        echo "Checked out revision 1."
        ;;
      info|update)
        if [ -f .svn/broken ]; then
          echo "svn: E155007: '$(pwd -P)' is not a working copy" >&2
          exit 1
        fi
        if [ -f .svn/warn ]; then
          echo "svn: warning: W155010: The node was not found." >&2
        fi
        if [ "$cmd" = info ]; then
          if [ -f .svn/url ]; then url=$(cat .svn/url); else url=none; fi
          echo "Path: ."
          echo "URL: $url"
          echo "Revision: 42"
        else
          if [ -f .svn/longline ]; then
            head -c 200000 /dev/zero | tr "\\000" x
            echo
          fi
          echo "Updating '.':"
          echo "At revision 42."
        fi
        ;;
      *)
        echo "svn: unknown command '$cmd'" >&2
        exit 1
        ;;
    esac
    """,
)


@pytest.fixture
def fake_svn(
    tmp_path: pathlib.Path,
    monkeypatch: pytest.MonkeyPatch,
) -> pathlib.Path:
    """Install a fake ``svn`` script and return its path."""
    if sys.platform == "win32":
        pytest.skip("fake svn is a POSIX shell script")
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir(exist_ok=True)
    script = bin_dir / "svn"
    script.write_text(FAKE_SVN, encoding="utf-8")
    script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    monkeypatch.setenv("NTS_FAKE_SVN_LOG", str(tmp_path / "svn.log"))
    return script


@pytest.fixture
def svn_calls(tmp_path: pathlib.Path) -> t.Callable[[], list[SvnCall]]:
    """Return a reader for the invocations recorded by :func:`fake_svn`."""

    def read() -> list[SvnCall]:
        return read_svn_log(tmp_path / "svn.log")

    return read
