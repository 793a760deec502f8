"""Click CLI group for vptestbed."""

import click

from vptestbed.report.models import TestReport, TestResultType


@click.group()
@click.version_option(package_name="vptestbed")
@click.option("--log-level", default=None, help="Override the configured log level")
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """vptestbed: conformance checks for OpenID4VP verifier and issuer logs."""
    from vptestbed.config import load_config
    from vptestbed.log import setup_logging

    config = load_config()
    setup_logging(log_level or config.log_level)
    ctx.obj = config


def emit_report(report: TestReport, fmt: str, output_path: str | None, indent: int | None) -> None:
    """Print or write the report, then exit non-zero if it failed."""
    if fmt == "json":
        content = report.model_dump_json(indent=indent)
    else:
        lines = [
            f"Result: {report.result.value}",
            f"Errors: {report.counters.error_count}  Warnings: {report.counters.warning_count}",
        ]
        for item in report.items[1:]:
            lines.append(f"{item.name}:")
            lines.extend(f"  {line}" for line in item.value.splitlines())
        content = "\n".join(lines)

    if output_path:
        with open(output_path, "w") as f:
            f.write(content + "\n")
        click.echo(f"Report written to {output_path} ({report.result.value})")
    else:
        click.echo(content)

    if report.result == TestResultType.FAILURE:
        raise SystemExit(1)
