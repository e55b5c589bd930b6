# === FILE: parked_domains/cli.py ===
#!/usr/bin/env python3
"""
Command-line entry point of ParkedDomains.

Checks domains/URLs for parked-domain placeholder pages and prints the
deduplicated list of parked ones as a JSON array.

Options:
  -u URL              Single domain or HTTP URL to scan
  -f PATH             File with one domain/URL per line
  -o PATH             Also write the JSON result to this file
  -threads INT        Number of workers (default: 10)
  -timeout SEC        Per-request timeout (default: 25)
  -insecure[=BOOL]    Skip TLS certificate verification (default: true)
  -verbose[=BOOL]     Show per-URL fetch errors (default: false)
  -version            Print build metadata and exit
  --config PATH       YAML/JSON config file
  --signatures PATH   Extra signature phrases, one per line
  --log-file PATH     Also write logs to this file

Example:
  parkeddomains -f domains.txt -threads 20 -o parked.json
"""
import asyncio
from pathlib import Path

import click

from parked_domains.config import load_config, with_overrides
from parked_domains.logger import configure as configure_logging
from parked_domains.report.json_report import render_json
from parked_domains.scanner import start_scan
from parked_domains.utils import read_wordlist
from parked_domains.version import build_info

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


def report_error(message: str):
    click.secho(message, fg='red', err=True)


def _print_version(ctx, param, value):
    if not value or ctx.resilient_parsing:
        return
    for key, val in build_info().items():
        click.echo(f'{key}: {val}')
    ctx.exit()


@click.command(context_settings=CONTEXT_SETTINGS)
@click.option('-u', 'url', default='', help='The single domain or HTTP URL to scan.')
@click.option(
    '-f', 'source_file',
    default=None,
    type=click.Path(path_type=Path),
    help='The source file containing a list of domains/URLs to scan.'
)
@click.option(
    '-o', 'output',
    default=None,
    type=click.Path(path_type=Path),
    help='Output file to write deduplicated results.'
)
@click.option(
    '-threads', '--threads', 'threads',
    type=click.IntRange(min=1),
    default=None,
    help='Number of threads to use. Default is 10.'
)
@click.option(
    '-timeout', '--timeout', 'timeout',
    type=click.IntRange(min=1),
    default=None,
    help='Maximum timeout of each request in seconds. Default is 25.'
)
@click.option(
    '-insecure', '--insecure', 'insecure',
    type=click.BOOL, is_flag=False, flag_value=True, default=None,
    help='Allow insecure server connections when using SSL. Default is true.'
)
@click.option(
    '-verbose', '--verbose', 'verbose',
    type=click.BOOL, is_flag=False, flag_value=True, default=None,
    help='Enable verbose mode and show error messages.'
)
@click.option(
    '-version', '--version',
    is_flag=True, expose_value=False, is_eager=True, callback=_print_version,
    help='Print build metadata and exit.'
)
@click.option(
    '--config', 'config_path',
    default=None,
    type=click.Path(path_type=Path),
    help='Path to a YAML/JSON configuration file.'
)
@click.option(
    '--signatures', 'signatures_file',
    default=None,
    type=click.Path(path_type=Path),
    help='File with extra signature phrases, one per line.'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help='Also write logs to this file.'
)
@click.pass_context
def cli(ctx, url, source_file, output, threads, timeout, insecure, verbose,
        config_path, signatures_file, log_file):
    """Check domains/URLs for parked-domain placeholder content."""
    if not url and not source_file:
        click.echo('Please provide either a URL with the -u flag or a file with the -f flag.')
        click.echo(ctx.get_usage())
        return

    try:
        cfg = with_overrides(
            load_config(config_path),
            threads=threads,
            timeout=timeout,
            insecure=insecure,
            verbose=verbose,
            signatures_file=signatures_file,
        )
    except (OSError, ValueError, TypeError) as e:
        report_error(f'Error loading configuration: {e}')
        return

    configure_logging(level='DEBUG' if cfg.verbose else 'ERROR', log_file=log_file)

    if url:
        targets = [url]
    else:
        try:
            targets = read_wordlist(source_file)
        except (OSError, UnicodeDecodeError) as e:
            report_error(f'Error opening file: {e}')
            return

    try:
        report = asyncio.run(start_scan(cfg, targets))
    except Exception as e:
        report_error(f'Error while scanning: {e}')
        ctx.exit(1)

    try:
        result = report.json()
    except (TypeError, ValueError) as e:
        report_error(f'Error marshalling JSON: {e}')
        return

    click.echo(result)

    # stdout result stands even if the file cannot be written
    if output:
        try:
            render_json(report, output)
        except OSError as e:
            report_error(f'Error writing to output file: {e}')


if __name__ == "__main__":
    cli()
