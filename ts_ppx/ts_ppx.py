import re
from pathlib import Path

import click

from .cli_utils import generation_comment
from .logging import configure_logging
from .pipeline import GeneratorConfig, PpxConfig, PpxError, run_ts_ppx
from .pipeline.backends import AVAILABLE_GENERATORS
from .pipeline.config import default_generators


def _select_generators(config: PpxConfig, names: tuple[str, ...]) -> list[GeneratorConfig]:
    """Keep only the named generators, falling back to their default configuration."""
    configured = {g.name: g for g in config.generators}
    defaults = {g.name: g for g in default_generators()}
    return [configured.get(name) or defaults.get(name) or GeneratorConfig(name=name) for name in names]


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, dir_okay=False, resolve_path=True))
@click.option("--pattern", "-p", default=None, type=str, help="Regex a source path must contain to be scanned")
@click.option(
    "--generator",
    "-g",
    "generators",
    multiple=True,
    type=click.Choice(list(AVAILABLE_GENERATORS)),
    help="Register only these generators (repeatable)",
)
@click.option("--tag", default=None, type=str, help="JSDoc tag marking directives")
@click.option("--prettier/--no-prettier", default=None, help="Format generated files with prettier")
@click.option(
    "--add-generation-comment",
    is_flag=True,
    default=False,
    help="Add a comment naming this command at the top of every generated file",
)
@click.option("--verbose", "-v", is_flag=True, default=False)
@click.argument("source_root", required=False, default=None, type=click.Path(exists=True, file_okay=False))
def ts_ppx(config, pattern, generators, tag, prettier, add_generation_comment, verbose, source_root):
    configure_logging(verbose=verbose)

    if config is not None:
        config = PpxConfig.from_json_file(config)
    elif source_root is None:
        raise click.UsageError("Missing SOURCE_ROOT (pass it or set source_root in a --config file)")
    else:
        config = PpxConfig()

    # CLI flags override the config file
    if source_root is not None:
        config.source_root = str(Path(source_root))
    if pattern is not None:
        config.source_pattern = pattern
    if generators:
        config.generators = _select_generators(config, generators)
    if tag is not None:
        config.directive_tag = tag
    if prettier is not None:
        config.formatter.enabled = prettier
    if add_generation_comment:
        config.add_generation_comment = True

    try:
        run_config = config.build_run_config(generation_comment=generation_comment(ts_ppx))
        written = run_ts_ppx(run_config)
    except (PpxError, ValueError, re.error) as e:
        raise click.ClickException(str(e)) from e

    for path in written:
        click.echo(path)
