import json
import logging
from pathlib import Path

import click

from .pipeline import AnnotationMode, AtomicWriter, CodegenError, CodeGeneratorConfig, PipelineGenerator
from .pipeline.schema_ast import SchemaLoader


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option(
    "--annotations/--no-annotations",
    default=None,
    help="Generate decorated classes with validation metadata, or plain interfaces (overrides config file if set)",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable DEBUG logging")
@click.argument("source", type=str)
@click.argument("output", type=click.Path(file_okay=False, resolve_path=True))
def ts_model_codegen(config, annotations, verbose, source, output):
    """Generate TypeScript models from the schema item list at SOURCE (path or URL) into OUTPUT."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    if config is not None:
        try:
            with open(config) as f:
                config = CodeGeneratorConfig.from_dict(json.load(f))
        except (OSError, ValueError) as e:
            # json.JSONDecodeError is a ValueError
            raise click.ClickException(f"Invalid config file {config}: {e}") from e
    else:
        config = CodeGeneratorConfig()

    if annotations is not None:
        config.annotation_mode = AnnotationMode.ON if annotations else AnnotationMode.OFF

    try:
        items = SchemaLoader().load(source)
        out = PipelineGenerator(config).compile(items)
        # Only reached once the whole compilation succeeded
        AtomicWriter(config.output).write_output(out, Path(output))
    except (CodegenError, OSError) as e:
        raise click.ClickException(str(e)) from e

