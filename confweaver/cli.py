#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Command-line interface for ConfWeaver.

This module provides the main CLI entry point and the subcommands for
inspecting KEY=VALUE configuration files and launching processes with
their items exported as environment variables.
"""

import json
import os
import subprocess
import sys

import click
import yaml

from .version import __version__
from .config import (
    ConfigError,
    apply_to_environment,
    format_items,
    merge_overrides,
    parse_override,
    read_and_parse,
)
from .logging_setup import level_for_flags, setup_logging


def _set_option(func):
    return click.option('--set', 'overrides', multiple=True, metavar='KEY=VALUE',
                        help='Override a config item (repeatable)')(func)


def _load(config_file, overrides=()):
    """Read a config file and apply command-line overrides, exiting on error."""
    try:
        items = read_and_parse(config_file)
        if overrides:
            items = merge_overrides(items, [parse_override(expr) for expr in overrides])
    except ConfigError as e:
        click.echo(f"✗ Error: {e}", err=True)
        sys.exit(1)
    return items


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
@click.option('--quiet', '-q', is_flag=True, help='Suppress non-error output')
@click.pass_context
def main(ctx, verbose, quiet):
    """
    ConfWeaver: flat KEY=VALUE configuration files

    Parse deployment config files with '#' comments, inspect their items,
    and run commands with the items exported as environment variables.
    """
    ctx.ensure_object(dict)
    ctx.obj['VERBOSE'] = verbose
    ctx.obj['QUIET'] = quiet
    setup_logging(level_for_flags(verbose, quiet))


@main.command('show')
@click.argument('config_file', type=click.Path())
@click.option('--format', '-f', 'fmt', type=click.Choice(['summary', 'env', 'yaml', 'json']),
              default='summary', help='Output format')
@_set_option
def show(config_file, fmt, overrides):
    """Display the items of a configuration file."""
    items = _load(config_file, overrides)

    if fmt == 'env':
        click.echo(format_items(items), nl=False)
    elif fmt == 'yaml':
        click.echo(yaml.safe_dump(items.to_dict(), default_flow_style=False, sort_keys=False), nl=False)
    elif fmt == 'json':
        click.echo(json.dumps(items.to_dict(), indent=2))
    else:
        click.echo(f"Configuration from: {config_file}")
        click.echo("=" * 60)
        for key, value in items.items():
            click.echo(f"  {key} = {value}")
        click.echo("=" * 60)
        click.echo(f"{len(items)} item(s)")


@main.command('get')
@click.argument('config_file', type=click.Path())
@click.argument('key')
@click.option('--default', '-d', default=None, help='Value to print when KEY is absent')
def get(config_file, key, default):
    """Print the value of a single config item."""
    items = _load(config_file)

    value = items.get(key, default)
    if value is None:
        click.echo(f"✗ Key not found: {key}", err=True)
        sys.exit(1)
    click.echo(value)


@main.command('check')
@click.argument('config_file', type=click.Path())
@click.pass_context
def check(ctx, config_file):
    """Check that a configuration file can be read."""
    items = _load(config_file)

    if not ctx.obj.get('QUIET'):
        click.echo(f"✓ {config_file}: {len(items)} item(s)")


@main.command('run', context_settings={'ignore_unknown_options': True})
@click.argument('config_file', type=click.Path())
@click.argument('command', nargs=-1, required=True, type=click.UNPROCESSED)
@_set_option
def run(config_file, command, overrides):
    """
    Run COMMAND with the config items exported as environment variables.

    Separate the command from ConfWeaver's own options with '--':

        confweaver run deploy.conf -- gunicorn app:server
    """
    items = _load(config_file, overrides)

    env = dict(os.environ)
    apply_to_environment(items, env)

    try:
        result = subprocess.run(list(command), env=env)
    except OSError as e:
        click.echo(f"✗ Could not run {command[0]}: {e}", err=True)
        sys.exit(127)
    sys.exit(result.returncode)


if __name__ == '__main__':
    main()
