import logging

import click
from graphql import GraphQLError, build_schema

from .pipeline import CodeGeneratorConfig, ConfigError, GenerationError, SchemaGenerator


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option(
    "--add-imports",
    is_flag=True,
    default=False,
    help="Prepend the graphene imports the generated module needs",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log debug information")
@click.argument("path", default=None, type=click.Path(exists=True, resolve_path=True))
@click.argument("output", default=None, type=click.Path(resolve_path=True))
def graphql_schema_to_code(config, add_imports, verbose, path, output):
    logging.basicConfig(level=logging.DEBUG if verbose else logging.ERROR, format="%(levelname)s %(name)s: %(message)s")

    try:
        config = CodeGeneratorConfig.from_file(config) if config is not None else CodeGeneratorConfig()
    except ConfigError as e:
        raise click.ClickException(str(e)) from e

    # Apply CLI flag for imports (overrides config file if set)
    if add_imports:
        config.add_imports = True

    with open(path, encoding="utf-8") as f:
        sdl = f.read()

    try:
        result = SchemaGenerator(build_schema(sdl), config).generate()
    except (GraphQLError, TypeError, GenerationError) as e:
        raise click.ClickException(str(e)) from e

    for warning in result.warnings:
        click.echo(warning, err=True)

    with open(output, "w", encoding="utf-8") as f:
        f.write(result.code)
