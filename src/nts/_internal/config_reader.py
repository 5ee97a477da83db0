from __future__ import annotations

import json
import pathlib
import typing as t

import yaml

if t.TYPE_CHECKING:
    from typing import TypeAlias

    from nts.types import FormatLiteral

    RawConfigData: TypeAlias = dict[t.Any, t.Any]

YAML_SUFFIXES = frozenset({".yaml", ".yml"})


class ConfigReader:
    r"""Parse string data (JSON and YAML) into a dictionary.

    >>> cfg = ConfigReader({"project A": {"url": "svn://example/trunk"}})
    >>> print(cfg.dump("json"))
    {
        "project A": {
            "url": "svn://example/trunk"
        }
    }
    >>> cfg.dump("yaml")
    'project A:\n  url: svn://example/trunk\n'
    """

    def __init__(self, content: RawConfigData) -> None:
        self.content = content

    @staticmethod
    def format_for(path: pathlib.Path) -> FormatLiteral:
        """Return the serialization format used for ``path``.

        Anything that is not a YAML file is treated as JSON, including files
        without a suffix.

        >>> ConfigReader.format_for(pathlib.Path("projects.yml"))
        'yaml'
        >>> ConfigReader.format_for(pathlib.Path("projects.json"))
        'json'
        >>> ConfigReader.format_for(pathlib.Path("projects"))
        'json'
        """
        if path.suffix.lower() in YAML_SUFFIXES:
            return "yaml"
        return "json"

    @staticmethod
    def _load(fmt: FormatLiteral, content: str) -> t.Any:
        """Load raw config data and directly return it.

        >>> ConfigReader._load("json", '{ "project A": {"url": "svn://x"} }')
        {'project A': {'url': 'svn://x'}}

        >>> ConfigReader._load("yaml", 'project A: {url: "svn://x"}')
        {'project A': {'url': 'svn://x'}}
        """
        if fmt == "yaml":
            return yaml.load(content, Loader=yaml.SafeLoader)
        if fmt == "json":
            return json.loads(content)
        msg = f"{fmt} not supported in configuration"
        raise NotImplementedError(msg)

    @classmethod
    def load(cls, fmt: FormatLiteral, content: str) -> ConfigReader:
        """Load raw config data into a ConfigReader instance (to dump later).

        >>> ConfigReader.load("json", '{"a": {"url": "svn://x"}}').content
        {'a': {'url': 'svn://x'}}
        """
        return cls(content=cls._load(fmt=fmt, content=content))

    @classmethod
    def _from_file(cls, path: pathlib.Path) -> t.Any:
        """Load data from file path directly, choosing the format by suffix."""
        assert isinstance(path, pathlib.Path)
        content = path.read_text(encoding="utf-8")
        return cls._load(fmt=cls.format_for(path), content=content)

    @classmethod
    def from_file(cls, path: pathlib.Path) -> ConfigReader:
        """Load data from file path."""
        return cls(content=cls._from_file(path=path))

    @staticmethod
    def _dump(
        fmt: FormatLiteral,
        content: RawConfigData,
        indent: int = 4,
    ) -> str:
        r"""Dump directly.

        >>> ConfigReader._dump("json", {"a": {"url": "svn://x"}}, indent=2)
        '{\n  "a": {\n    "url": "svn://x"\n  }\n}'
        """
        if fmt == "yaml":
            return yaml.dump(
                content,
                indent=indent,
                default_flow_style=False,
                sort_keys=False,
                allow_unicode=True,
                Dumper=yaml.SafeDumper,
            )
        if fmt == "json":
            return json.dumps(content, indent=indent)
        msg = f"{fmt} not supported in config"
        raise NotImplementedError(msg)

    def dump(self, fmt: FormatLiteral, indent: int = 4) -> str:
        """Dump via ConfigReader instance."""
        if fmt == "yaml":
            indent = min(indent, 2)
        return self._dump(fmt=fmt, content=self.content, indent=indent)
