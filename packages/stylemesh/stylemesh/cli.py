"""stylemesh: CLI Entry Point
--------------------------
Typer application behind the ``stylemesh`` console script.

Public API
----------
``shapes`` : List the registered node shapes and arrow types
``stats`` : Realize a style sheet and report template cache statistics
"""

from __future__ import annotations

import typer

from .cache import TemplateCache
from .core.config import load_render_config
from .core.errors import StyleMeshError, configure_logging, get_logger
from .meshes import EdgeMeshFactory, NodeMeshFactory
from .sheet import apply_style_sheet, load_style_sheet

app = typer.Typer(help="stylemesh CLI")


@app.callback()
def main():
    """stylemesh command line interface."""
    pass


@app.command()
def shapes(
    tag: str | None = typer.Option(None, help="Only list entries carrying this tag"),
):
    """List registered node shapes and arrow types.

    Examples
    --------
        stylemesh shapes
        stylemesh shapes --tag polyhedron

    """
    node_factory = NodeMeshFactory()
    edge_factory = EdgeMeshFactory()

    for label, registry in (
        ("Node shapes", node_factory.registry),
        ("Arrow types", edge_factory.arrow_registry),
    ):
        entries = registry.list()
        if tag is not None:
            entries = {k: v for k, v in entries.items() if tag in v.get("tags", [])}
        typer.echo(f"\n{label}:")
        for name, meta in entries.items():
            tags = ", ".join(meta.get("tags", []))
            typer.echo(f"  - {name}" + (f" [{tags}]" if tags else ""))
        typer.echo(f"Total: {len(entries)} {registry.name}(s)")


@app.command()
def stats(
    style_file: str = typer.Argument(..., help="Path to a YAML style sheet"),
    config: str | None = typer.Option(None, "--config", help="Render config file"),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose logging"
    ),
    log_file: str | None = typer.Option(None, help="Write logs to file path"),
    log_json: bool = typer.Option(False, help="Log in JSON format"),
):
    """Build every element of a style sheet and report template sharing.

    STYLE_FILE lists node styles under ``nodes:`` and edge styles under
    ``edges:``; each entry may carry a ``count`` of elements drawn with it.

    Examples
    --------
        stylemesh stats graph-style.yaml
        stylemesh stats -v --config render.yaml graph-style.yaml

    """
    configure_logging(verbose=verbose, log_file=log_file, as_json=log_json)
    log = get_logger()

    try:
        render_cfg = load_render_config(config_path=config)
        sheet = load_style_sheet(style_file)
        cache = TemplateCache(config=render_cfg)
        instances = apply_style_sheet(
            sheet,
            cache,
            NodeMeshFactory(config=render_cfg),
            EdgeMeshFactory(config=render_cfg),
        )
    except StyleMeshError as e:
        log.error(str(e))
        raise typer.Exit(code=1) from e

    summary = cache.stats()
    typer.echo(f"Instances: {len(instances)}")
    typer.echo(f"Templates: {summary['size']}")
    typer.echo(f"Hits: {summary['hits']}")
    typer.echo(f"Misses: {summary['misses']}")
    typer.echo(f"Hit rate: {summary['hit_rate']:.1%}")
    if verbose:
        for key in cache.keys():
            typer.echo(f"  - {key}")
