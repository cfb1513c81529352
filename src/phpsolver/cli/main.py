"""
phpsolver command line.

Every command loads a JSON index snapshot and answers one question about
it. Output is JSON (machine mode, the default) or rich tables (--human).
"""

from pathlib import Path
from typing import Any, Dict, Optional

import typer

from phpsolver.logging_config import logger, setup_logging
from phpsolver.exceptions import ConfigError, IndexCorruptionError, TypeSyntaxError
from phpsolver.index import MemorySymbolIndex, load_index
from phpsolver.resolution import InheritanceResolver, resolve_types
from phpsolver.types import parse_types
from phpsolver.user_config import get_user_config
from .config import CLIConfig
from .output import emit, emit_error, emit_table

app = typer.Typer(help="Symbolic type resolution over a PHP symbol index.")

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


def index_option():
    return typer.Option(
        None,
        "--index",
        "-i",
        help="Path to an index snapshot. Defaults to index.path from config, then 'phpsolver-index.json' in CWD.",
        dir_okay=False,
    )


@app.callback()
def global_options(
    human: bool = typer.Option(
        False,
        "--human",
        "-H",
        help="Human mode: rich tables instead of JSON (also via PHPSOLVER_HUMAN_MODE env var)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG level."),
):
    """Global options applied before every command."""
    CLIConfig.set_machine_mode(False if human else None)

    try:
        level = _configured_log_level()
    except ConfigError as e:
        emit_error(str(e))
        raise typer.Exit(code=1)
    setup_logging(level="DEBUG" if verbose else level)


def _configured_log_level() -> str:
    level = str(get_user_config().get("logging.level", "INFO")).upper()
    if level not in LOG_LEVELS:
        raise ConfigError(f"logging.level must be one of {', '.join(LOG_LEVELS)}, got {level!r}")
    return level


def _load(index_path: Optional[Path]) -> MemorySymbolIndex:
    path = index_path or CLIConfig.get_default_index_path()
    try:
        return load_index(path)
    except (FileNotFoundError, IndexCorruptionError) as e:
        emit_error(str(e))
        raise typer.Exit(code=1)


def _member_payload(kind: str, class_name: str, member: str, found: Any) -> Dict[str, Any]:
    payload: Dict[str, Any] = {"class": class_name, kind: member, "found": found is not None}
    if found is not None:
        payload["declared_in"] = found.impl_class_name
        payload["type"] = str(found.info.typ)
    return payload


def _emit_member(title: str, payload: Dict[str, Any]) -> None:
    if CLIConfig.is_machine_mode():
        emit(payload)
        return
    emit_table(title, ["Field", "Value"], [(k, v) for k, v in payload.items()])


@app.command("resolve")
def resolve(
    type_text: str = typer.Argument(..., help="Type expression(s), e.g. '@mcall(@global(db),query)|int'."),
    context_class: str = typer.Option("", "--class", "-c", help="Class `static` is bound to."),
    index_path: Optional[Path] = index_option(),
):
    """
    Resolve symbolic type expressions to concrete type names.
    """
    index = _load(index_path)

    try:
        types = parse_types(type_text)
    except TypeSyntaxError as e:
        emit_error(str(e))
        raise typer.Exit(code=1)

    resolved = sorted(resolve_types(index, types, context_class=context_class))
    logger.debug(f"Resolved {types} to {resolved}")

    if CLIConfig.is_machine_mode():
        emit({"type": str(types), "resolved": resolved})
        return
    emit_table(f"Resolved '{types}'", ["Type"], [(name,) for name in resolved])


@app.command("find-method")
def find_method(
    class_name: str = typer.Argument(..., help="Class or trait to start from."),
    method: str = typer.Argument(..., help="Method name."),
    index_path: Optional[Path] = index_option(),
):
    """
    Find a method through traits, parent interfaces and ancestors.
    """
    index = _load(index_path)
    found = InheritanceResolver(index).find_method(class_name, method)

    payload = _member_payload("method", class_name, method, found)
    if found is not None:
        payload["params"] = [{"name": p.name, "type": str(p.typ)} for p in found.info.params]
    _emit_member(f"{class_name}::{method}()", payload)


@app.command("find-property")
def find_property(
    class_name: str = typer.Argument(..., help="Class to start from."),
    prop: str = typer.Argument(..., help="Property name without the leading $."),
    index_path: Optional[Path] = index_option(),
):
    """
    Find a property on a class or its ancestors.
    """
    index = _load(index_path)
    found = InheritanceResolver(index).find_property(class_name, prop)
    _emit_member(f"{class_name}::${prop}", _member_payload("property", class_name, prop, found))


@app.command("find-constant")
def find_constant(
    class_name: str = typer.Argument(..., help="Class to start from."),
    constant: str = typer.Argument(..., help="Constant name."),
    index_path: Optional[Path] = index_option(),
):
    """
    Find a class constant (implemented interfaces are searched first).
    """
    index = _load(index_path)
    found = InheritanceResolver(index).find_constant(class_name, constant)

    payload = _member_payload("constant", class_name, constant, found)
    if found is not None:
        payload["value"] = found.info.value
    _emit_member(f"{class_name}::{constant}", payload)


@app.command("implements")
def implements(
    class_name: str = typer.Argument(..., help="Class to check."),
    interface: str = typer.Argument(..., help="Interface name."),
    index_path: Optional[Path] = index_option(),
):
    """
    Check whether a class implements an interface.
    """
    index = _load(index_path)
    result = InheritanceResolver(index).implements(class_name, interface)
    _emit_member(
        f"{class_name} implements {interface}",
        {"class": class_name, "interface": interface, "implements": result},
    )


@app.command("stats")
def stats(index_path: Optional[Path] = index_option()):
    """
    Show symbol counts for an index snapshot.
    """
    index = _load(index_path)
    payload: Dict[str, Any] = dict(index.stats())
    payload["indexing_complete"] = index.is_indexing_complete()

    if CLIConfig.is_machine_mode():
        emit(payload)
        return
    emit_table("Index statistics", ["Kind", "Count"], list(payload.items()))


if __name__ == "__main__":
    app()
