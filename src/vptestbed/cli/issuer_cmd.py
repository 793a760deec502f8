"""vptestbed issuer: credential-offer log validation."""

import click

from vptestbed.cli.main import cli, emit_report


@cli.group()
def issuer() -> None:
    """Issuer credential-offer log commands."""


@issuer.command()
@click.argument("logfile", type=click.File("r"))
@click.option("--format", "fmt", default="json", type=click.Choice(["json", "text"]))
@click.option("--output", "output_path", default=None, help="Output file path")
@click.pass_obj
def validate(config, logfile, fmt: str, output_path: str | None) -> None:
    """Validate issuer logs (use - for stdin)."""
    from vptestbed.issuer.service import validate_issuer_logs
    from vptestbed.testbed.request import InputError

    try:
        report = validate_issuer_logs(logfile.read())
    except InputError as e:
        click.echo(f"Invalid issuer log: {e}")
        raise SystemExit(1)

    emit_report(report, fmt, output_path, config.json_indent)
