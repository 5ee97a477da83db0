"""Typings for nts.

Configuration Object Graph
--------------------------

The user-facing ``projects.json`` maps *project names* to a small record::

    {
        "project A": {
            "url": "https://subversion.example.com/repo/trunk",
            "notes": "replace me!"
        }
    }

In Python we model this as:

``ProjectDict`` - a single project record as stored on disk
``ProjectConfig`` - mapping of project name to ``ProjectDict``
``Project`` - a ``ProjectDict`` copy with its ``name`` attached at runtime
"""

from __future__ import annotations

import typing as t

from typing_extensions import NotRequired, TypeAlias, TypedDict


class ProjectDict(TypedDict):
    """Project record as written in the configuration file."""

    url: str
    notes: NotRequired[str]


class Project(ProjectDict):
    """Project record with the configuration key attached. Never persisted."""

    name: str


ProjectConfig: TypeAlias = dict[str, ProjectDict]

FormatLiteral = t.Literal["json", "yaml"]
