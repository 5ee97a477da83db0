"""Conftest.py (root-level).

We keep this in root so the fixtures are available to pytest's doctest plugin
over ``src/nts`` as well as to ``tests/``, without shipping conftest.py in the
wheel.
"""

from __future__ import annotations

import pathlib
import typing as t

import pytest


@pytest.fixture(autouse=True)
def add_doctest_fixtures(
    request: pytest.FixtureRequest,
    doctest_namespace: dict[str, t.Any],
) -> None:
    """Harness pytest fixtures to doctests namespace."""
    from _pytest.doctest import DoctestItem

    if isinstance(request._pyfuncitem, DoctestItem):
        doctest_namespace["tmp_path"] = request.getfixturevalue("tmp_path")


@pytest.fixture
def user_path(tmp_path: pathlib.Path) -> pathlib.Path:
    """Return temporary directory standing in for the user's home."""
    p = tmp_path / "home"
    p.mkdir(exist_ok=True)
    return p


@pytest.fixture(autouse=True)
def set_home(monkeypatch: pytest.MonkeyPatch, user_path: pathlib.Path) -> pathlib.Path:
    """Point HOME (and USERPROFILE) at :func:`user_path`."""
    monkeypatch.setenv("HOME", str(user_path))
    monkeypatch.setenv("USERPROFILE", str(user_path))
    return user_path


@pytest.fixture
def work_path(tmp_path: pathlib.Path) -> pathlib.Path:
    """Return temporary directory used as the current working directory."""
    p = tmp_path / "work"
    p.mkdir(exist_ok=True)
    return p


@pytest.fixture(autouse=True)
def cwd_default(monkeypatch: pytest.MonkeyPatch, work_path: pathlib.Path) -> None:
    """Change the current directory to a temporary directory."""
    monkeypatch.chdir(work_path)


@pytest.fixture(autouse=True)
def clean_environ(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the caller's svn override and color preference out of tests."""
    monkeypatch.delenv("NTS_SVN", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)
