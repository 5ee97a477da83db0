"""CLI utilities for nts."""

from __future__ import annotations

import argparse
import logging
import textwrap
import typing as t

from nts import exc
from nts.__about__ import __version__
from nts.config import DEFAULT_CONFIG_FILENAME
from nts.log import setup_logger
from nts.reporter import Reporter
from nts.runner import SVN_BIN_ENV, SvnRunner, get_svn_bin

from ._colors import Colors, get_color_mode
from .bulk import info_command, init_command, update_command
from .generate import create_generate_subparser, generate_config, generate_sample
from .list import list_projects

log = logging.getLogger(__name__)


def build_description(
    intro: str,
    example_blocks: t.Sequence[tuple[str | None, t.Sequence[str]]],
) -> str:
    """Assemble help text with optional example sections."""
    sections: list[str] = []
    intro_text = textwrap.dedent(intro).strip()
    if intro_text:
        sections.append(intro_text)

    for heading, commands in example_blocks:
        if not commands:
            continue
        title = "examples:" if heading is None else f"{heading} examples:"
        lines = [title]
        lines.extend(f"  {command}" for command in commands)
        sections.append("\n".join(lines))

    return "\n\n".join(sections)


CLI_DESCRIPTION = build_description(
    """
    Manage multiple Subversion working copies from a single JSON file.

    The config file is looked up in the current directory, then in your home
    directory.
    """,
    (
        ("list", ["nts list", "nts -v list"]),
        ("init", ["nts init", "nts -c work.json init"]),
        ("update", ["nts update", "nts -v update"]),
        ("info", ["nts info"]),
        ("generate", ["nts generate sample", "nts -c found.json generate"]),
    ),
)

COMMANDS: dict[str, tuple[str, str]] = {
    "list": ("list projects", "List configured projects."),
    "info": ("get the source control info", "Run `svn info` in every project."),
    "generate": (
        "generate a config file in cwd",
        """
        Write a config file.

        With `sample`, write an example config. Otherwise scan the current
        directory for svn working copies and write a config describing them.
        """,
    ),
    "update": ("update repositories", "Run `svn update` in every project."),
    "init": (
        "initialize projects (svn checkout)",
        "Check out every project into a directory named after it.",
    ),
}


def create_parser() -> argparse.ArgumentParser:
    """Create CLI argument parser for nts."""
    parser = argparse.ArgumentParser(
        prog="nts",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description=CLI_DESCRIPTION,
    )
    parser.add_argument(
        "--version",
        "-V",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-c",
        "--config",
        metavar="FILE",
        default=DEFAULT_CONFIG_FILENAME,
        help=f"optional custom config file (default: {DEFAULT_CONFIG_FILENAME})",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="display verbose information",
    )
    parser.add_argument(
        "--color",
        choices=["auto", "always", "never"],
        default="auto",
        help="when to use colors (default: auto)",
    )
    parser.add_argument(
        "--log-level",
        metavar="level",
        action="store",
        default="INFO",
        help="log level (debug, info, warning, error, critical)",
    )
    parser.add_argument(
        "--svn",
        metavar="BIN",
        dest="svn_bin",
        help=f"svn executable (default: ${SVN_BIN_ENV} or svn)",
    )

    subparsers = parser.add_subparsers(dest="subparser_name")
    for name, (help_text, description) in COMMANDS.items():
        subparser = subparsers.add_parser(
            name,
            help=help_text,
            formatter_class=argparse.RawDescriptionHelpFormatter,
            description=build_description(description, ()),
        )
        if name == "generate":
            create_generate_subparser(subparser)
    return parser


def cli(_args: list[str] | None = None) -> None:
    """CLI entry point for nts.

    Exits with status 1 when the config cannot be found, parsed or written.
    """
    parser = create_parser()
    args = parser.parse_args(_args)

    setup_logger(log=log, level=args.log_level.upper())

    if args.subparser_name is None:
        parser.print_help()
        return

    reporter = Reporter(Colors(get_color_mode(args.color)))
    runner = SvnRunner(
        reporter,
        bin_name=get_svn_bin(args.svn_bin),
        verbose=args.verbose,
    )

    try:
        if args.subparser_name == "list":
            list_projects(args.config, reporter, verbose=args.verbose)
        elif args.subparser_name == "info":
            info_command(args.config, runner)
        elif args.subparser_name == "update":
            update_command(args.config, runner)
        elif args.subparser_name == "init":
            init_command(args.config, runner)
        elif args.subparser_name == "generate":
            if args.mode == "sample":
                generate_sample(args.config, reporter, verbose=args.verbose)
            else:
                generate_config(args.config, runner)
    except exc.ConfigException as e:
        reporter.error(e)
        raise SystemExit(1) from e
