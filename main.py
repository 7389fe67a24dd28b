#!/usr/bin/env python3
"""
Main CLI for OS Font Resolution
===============================

This CLI resolves the native user-interface font of an operating system
release, or of the machine it runs on.
"""

import json
import logging
import sys
from pathlib import Path

import click

# Setup logging
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

try:
    from osfont.core.config import CATALOG_BACKENDS, OSFontConfig
    from osfont.core.exceptions import ConfigurationError, InvalidArgumentError, OSDetectionError
    from osfont.core.validation import parse_version
    from osfont.detection import detect_os
    from osfont.fonts import FontResolution, FontResolver, build_catalog, iter_rules
except ImportError as e:
    logger.exception(f"Import failed: {e}")
    logger.exception("Make sure you have all dependencies installed and the project is properly set up")
    sys.exit(1)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Path to configuration YAML file",
)
@click.pass_context
def cli(ctx, verbose, config):
    """OS user-interface font resolution CLI."""
    try:
        app_config = OSFontConfig.from_env_and_yaml(yaml_path=config)
    except ConfigurationError as e:
        logger.exception(f"Configuration failed: {e}")
        sys.exit(1)

    logging.getLogger().setLevel(logging.DEBUG if verbose else app_config.log_level)
    ctx.obj = app_config


def _make_resolver(config: OSFontConfig, catalog_backend: str | None) -> FontResolver:
    if catalog_backend:
        config = config.model_copy(update={"catalog_backend": catalog_backend})
    return FontResolver(build_catalog(config))


def _print_resolution(result: FontResolution, as_json: bool) -> None:
    if as_json:
        print(json.dumps(result.to_dict(), indent=2))
        return

    print(f"Font: {result.font_name or '(none)'}")
    print(f"Size: {result.font_size if result.font_size is not None else '(none)'}")
    for advisory in result.advisories:
        print(f"Advisory: {advisory}")


catalog_option = click.option(
    "--catalog",
    type=click.Choice(CATALOG_BACKENDS),
    help="Font catalog used to check font availability",
)
json_option = click.option("--json", "as_json", is_flag=True, help="Print result as JSON")


@cli.command()
@click.argument("os_name")
@click.argument("version", required=False, default="")
@catalog_option
@json_option
@click.pass_obj
def resolve(config, os_name, version, catalog, as_json):
    """Resolve the UI font of OS_NAME at VERSION (e.g. macos 10.11)."""
    try:
        os_version = parse_version(version) if os_name and version else []
        result = _make_resolver(config, catalog).resolve(os_name, os_version)
    except InvalidArgumentError as e:
        logger.error(f"Invalid arguments: {e}")
        sys.exit(1)

    _print_resolution(result, as_json)


@cli.command()
def detect():
    """Show the detected OS tag and version."""
    try:
        os_name, os_version = detect_os()
    except OSDetectionError as e:
        logger.warning(f"OS detection failed: {e}")
        os_name, os_version = "", []

    print(f"OS: {os_name or '(unknown)'}")
    print(f"Version: {'.'.join(str(v) for v in os_version) or '(unknown)'}")


@cli.command(name="system-font")
@catalog_option
@json_option
@click.pass_obj
def system_font(config, catalog, as_json):
    """Resolve the UI font of the running OS."""
    # avoid error if OS cannot be determined
    try:
        os_name, os_version = detect_os()
    except OSDetectionError as e:
        logger.warning(f"OS detection failed: {e}")
        os_name, os_version = "", []

    result = _make_resolver(config, catalog).resolve(os_name, os_version)
    _print_resolution(result, as_json)


@cli.command()
def rules():
    """List the UI font rules."""
    for tag, rule in iter_rules():
        line = f"{tag:<8} {rule.describe_range():<18} {rule.font_name} {rule.font_size}pt"
        if rule.replaces:
            line += f" (replaces {rule.replaces})"
        print(line)


if __name__ == "__main__":
    cli()
