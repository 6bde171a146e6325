"""
Main entry point for pathget. Accessed by 'pathget' in the command line.
"""
from functools import update_wrapper
import json
import logging
from pathlib import Path
import click
from pydantic import ValidationError

from pathget.config import GetConfig, get_config
from pathget.core.errors import PathGetError
from pathget.core.get import MISSING, base_get
from pathget.core.paths import string_to_path
from pathget.core.tags import get_tag
from pathget.utils.io import load_document
from pathget.utils.parse import parse_scalar


def pass_config(f):
    """
    Decorator to pass a GetConfig to Click commands that need it.
    Ensures the config is loaded once and passed as the first argument.
    """
    @click.pass_context
    def new_func(ctx: click.Context, *args, **kwargs):
        ctx.ensure_object(dict)
        cfg = ctx.obj.get('config')
        if cfg is None:
            opts = ctx.obj.get('global_opts', {})
            try:
                cfg = get_config(opts.get('config_path'))
            except (PathGetError, ValidationError) as exc:
                raise click.ClickException(str(exc)) from exc
            if opts.get('verbose'):
                cfg.verbose = True
            if cfg.verbose:
                logging.getLogger().setLevel(logging.DEBUG)
                logging.debug("Effective config: %s", cfg.model_dump())
            ctx.obj['config'] = cfg
        return f(ctx.obj['config'], *args, **kwargs)
    return update_wrapper(new_func, f)


def _load(path: Path):
    try:
        return load_document(path)
    except PathGetError as exc:
        raise click.ClickException(str(exc)) from exc


def _resolve(cfg: GetConfig, document, path: str):
    if document is None:
        return MISSING
    try:
        return base_get(document, path, attribute_access=cfg.attribute_access)
    except PathGetError as exc:
        raise click.ClickException(str(exc)) from exc


def _dump(value) -> str:
    return json.dumps(value, indent=2, default=str)


@click.group()
@click.option('--config-path', type=click.Path(exists=True, dir_okay=False, path_type=Path),
              default=None, help="YAML file with default lookup options.")
@click.option('-v', '--verbose', is_flag=True, default=False,
              help="Debug logging, including how paths are parsed.")
@click.version_option(package_name="pathget")
@click.pass_context
def main(ctx, config_path, verbose):
    """pathget: read nested values from JSON/YAML documents by path."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj['global_opts'] = {
        'config_path': config_path,
        'verbose': verbose,
    }


@main.command(name="get")
@pass_config
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("path")
@click.option("--default", "-d", "default", default=None,
              help="Value printed when PATH does not resolve (parsed as YAML).")
@click.option("--tag", is_flag=True, default=False,
              help="Print the type tag of the value instead of the value.")
def get_command(cfg: GetConfig, file: Path, path: str, default: str | None, tag: bool):
    """
    Print the value at PATH in FILE as JSON.

    Example: pathget get data.json 'a[0].b.c'
    """
    document = _load(file)
    value = _resolve(cfg, document, path)
    if value is MISSING:
        value = parse_scalar(default) if default is not None else cfg.default
    click.echo(get_tag(value) if tag else _dump(value))


@main.command()
@pass_config
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("path")
@click.pass_context
def has(ctx: click.Context, cfg: GetConfig, file: Path, path: str):
    """Print whether PATH exists in FILE. Exits with status 1 when it does not."""
    document = _load(file)
    found = _resolve(cfg, document, path) is not MISSING
    click.echo("true" if found else "false")
    if not found:
        ctx.exit(1)


@main.command()
@click.argument("path")
def parse(path: str):
    """Print the keys a PATH string is split into."""
    click.echo(json.dumps(string_to_path(path)))


@main.command()
@pass_config
def config(cfg: GetConfig):
    """Show the effective configuration."""
    click.echo(cfg.model_dump_json(indent=2))
