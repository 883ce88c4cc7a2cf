"""Command line tool to inspect contracts and check configuration files.

```
confview describe myapp.config:EngineConfig
confview check myapp.config:EngineConfig engine.toml --table engine
```
"""

import argparse
import importlib
import logging
from typing import Sequence

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .binder import bind_reader
from .contract import ContractOptions, accessors
from .errors import ConfigurationError
from .extractors import JavaBeanNameExtractor, SnakeCaseNameExtractor
from .readers import ConfigReader, PropertiesReader, TomlReader
from .resolver import MetadataResolver
from .strategies import instantiate
from .translators import (
    DottedNameTranslator,
    EnvironmentNameTranslator,
    HyphenatedNameTranslator,
    UnderscoredNameTranslator,
)

__all__ = ["main", "load_contract"]

EXTRACTORS = {
    "javabean": JavaBeanNameExtractor,
    "snake": SnakeCaseNameExtractor,
}

TRANSLATORS = {
    "hyphenated": HyphenatedNameTranslator,
    "dotted": DottedNameTranslator,
    "underscored": UnderscoredNameTranslator,
    "environment": EnvironmentNameTranslator,
}


def load_contract(reference: str) -> type:
    """Import a contract given as `package.module:ClassName`."""
    module_name, sep, attr = reference.partition(":")
    if not sep or not attr:
        raise ValueError(f"Expected module:Contract, got {reference!r}")
    contract = importlib.import_module(module_name)
    for part in attr.split("."):
        contract = getattr(contract, part)
    return contract


def _reader_for(path: str, table: str) -> ConfigReader:
    if path.endswith(".toml"):
        return TomlReader(path, table)
    if table:
        raise ValueError("--table only applies to TOML files")
    return PropertiesReader(path)


def _options(args: argparse.Namespace) -> ContractOptions | None:
    if args.extractor is None and args.translator is None:
        return None
    return ContractOptions(
        extractor=EXTRACTORS.get(args.extractor),
        translator=TRANSLATORS.get(args.translator),
    )


def describe(args: argparse.Namespace, console: Console) -> int:
    contract = load_contract(args.contract)
    metadata = MetadataResolver().resolve(contract, _options(args))
    translator = instantiate(metadata.translator)

    table = Table(title=f"{contract.__qualname__} ({translator!r})")
    table.add_column("Accessor", style="cyan")
    table.add_column("Key", style="green")
    table.add_column("Type")
    table.add_column("Validator")
    for descriptor in sorted(metadata.properties, key=lambda d: d.accessor_name):
        table.add_row(
            descriptor.accessor_name,
            translator.join(descriptor.words),
            descriptor.type.name.lower(),
            getattr(descriptor.validator, "__qualname__", repr(descriptor.validator)),
        )
    console.print(table)

    ignored = sorted(
        {a.name for a in accessors(contract)}
        - {d.accessor_name for d in metadata.properties}
    )
    if ignored:
        console.print(f"[dim]Not properties: {', '.join(ignored)}[/dim]")
    return 0


def check(args: argparse.Namespace, console: Console) -> int:
    contract = load_contract(args.contract)
    try:
        view = bind_reader(
            _reader_for(args.file, args.table), contract, options=_options(args)
        )
    except ConfigurationError as e:
        console.print(f"[bold red]Invalid configuration:[/bold red] {escape(str(e))}")
        return 1

    metadata = MetadataResolver().resolve(contract, _options(args))
    table = Table(title=f"{args.file} is a valid {contract.__qualname__}")
    table.add_column("Accessor", style="cyan")
    table.add_column("Value")
    for name in sorted(d.accessor_name for d in metadata.properties):
        table.add_row(name, escape(repr(getattr(view, name)())))
    console.print(table)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="confview", description="Inspect typed configuration contracts."
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    def add_common(sub: argparse.ArgumentParser):
        sub.add_argument("contract", help="the contract as module:Class")
        sub.add_argument("--extractor", choices=sorted(EXTRACTORS))
        sub.add_argument("--translator", choices=sorted(TRANSLATORS))

    describe_parser = subparsers.add_parser(
        "describe", help="list the properties of a contract"
    )
    add_common(describe_parser)
    describe_parser.set_defaults(handler=describe)

    check_parser = subparsers.add_parser(
        "check", help="bind a TOML or .properties file to a contract"
    )
    add_common(check_parser)
    check_parser.add_argument("file", help="the configuration file")
    check_parser.add_argument("--table", default="", help="dotted TOML table to read")
    check_parser.set_defaults(handler=check)
    return parser


def main(argv: Sequence[str] | None = None, console: Console | None = None) -> int:
    args = build_parser().parse_args(argv)
    console = console if console is not None else Console()
    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )
    try:
        return args.handler(args, console)
    except (ImportError, AttributeError, KeyError, OSError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        return 2

