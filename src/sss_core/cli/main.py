"""Typer-based command line interface for SSS Core."""
from __future__ import annotations

import json
from pathlib import Path
from typing import List, Optional

import click
import typer
import yaml

from ..codec.decoder import decode_value, encode as encode_value
from ..config import AppConfig, FieldConfig, SelectionConfig, dump_default_config, load_config
from ..errors import SecretSharingError
from ..logging import configure_logging
from ..paths import default_config_path
from ..reconstruct import reconstruct_files

app = typer.Typer(help="SSS Core command line interface")


@app.callback()
def main(ctx: typer.Context, config: Optional[Path] = typer.Option(None, "--config", metavar="PATH")) -> None:
    try:
        ctx.obj = load_config(config)
    except ValueError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2)
    configure_logging(ctx.obj.logging.normalized_level())


def _effective_config(prime: Optional[str], allow_duplicates: bool) -> AppConfig:
    ctx = click.get_current_context()
    config: AppConfig = ctx.obj
    updates = {}
    if prime is not None:
        try:
            updates["field"] = FieldConfig(prime=prime)
        except ValueError as exc:
            raise typer.BadParameter(str(exc), param_hint="--prime") from exc
    if allow_duplicates:
        updates["selection"] = SelectionConfig(reject_duplicates=False)
    return config.model_copy(update=updates) if updates else config


@app.command()
def reconstruct(
    files: List[Path] = typer.Argument(..., help="Share documents (.json, .yaml)"),
    prime: Optional[str] = typer.Option(None, "--prime", help="Override the field modulus, e.g. 2^127-1"),
    allow_duplicates: bool = typer.Option(
        False, "--allow-duplicates", help="Let colliding x-coordinates reach the interpolator"
    ),
    as_json: bool = typer.Option(False, "--json", help="Emit one JSON document with every outcome"),
) -> None:
    config = _effective_config(prime, allow_duplicates)
    outcomes = reconstruct_files(files, config)
    if as_json:
        payload = [
            {
                "source": str(outcome.source),
                "secret": str(outcome.secret) if outcome.ok else None,
                "error": type(outcome.error).__name__ if outcome.error else None,
                "detail": str(outcome.error) if outcome.error else None,
            }
            for outcome in outcomes
        ]
        typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        for outcome in outcomes:
            if outcome.ok:
                typer.echo(f"Reconstructed secret for {outcome.source.name} is {outcome.secret}")
            else:
                typer.echo(
                    f"Failed to reconstruct {outcome.source.name}: "
                    f"{type(outcome.error).__name__}: {outcome.error}",
                    err=True,
                )
    if not all(outcome.ok for outcome in outcomes):
        raise typer.Exit(code=1)


@app.command()
def decode(
    value: str = typer.Argument(..., help="Numeral to decode"),
    base: str = typer.Option(..., "--base", help="Radix between 2 and 36"),
) -> None:
    try:
        typer.echo(str(decode_value(value, base)))
    except SecretSharingError as exc:
        typer.echo(f"{type(exc).__name__}: {exc}", err=True)
        raise typer.Exit(code=1)


@app.command()
def encode(
    value: int = typer.Argument(..., min=0, help="Non-negative integer to encode"),
    base: str = typer.Option(..., "--base", help="Radix between 2 and 36"),
) -> None:
    try:
        typer.echo(encode_value(value, base))
    except SecretSharingError as exc:
        typer.echo(f"{type(exc).__name__}: {exc}", err=True)
        raise typer.Exit(code=1)


@app.command()
def config_show() -> None:
    config: AppConfig = click.get_current_context().obj
    typer.echo(yaml.safe_dump(config.model_dump(mode="json"), sort_keys=False), nl=False)


@app.command()
def config_init(
    target: Optional[Path] = typer.Argument(None, help="Where to write the default configuration"),
) -> None:
    target = target or default_config_path()
    if target.exists():
        typer.echo(f"Refusing to overwrite {target}", err=True)
        raise typer.Exit(code=1)
    dump_default_config(target)
    typer.echo(f"Default configuration written to {target}")


@app.command()
def version() -> None:
    from ..version import __version__

    typer.echo(__version__)


if __name__ == "__main__":  # pragma: no cover
    app()
