"""vptestbed verifier: presentation log validation."""

import click

from vptestbed.cli.main import cli, emit_report


@cli.group()
def verifier() -> None:
    """Verifier presentation-log commands."""


@verifier.command()
@click.argument("logfile", type=click.File("r"))
@click.option(
    "--expected-event",
    default=None,
    help="Expected scenario: attestation_error or certificate_error (default: responses must match)",
)
@click.option("--format", "fmt", default="json", type=click.Choice(["json", "text"]))
@click.option("--output", "output_path", default=None, help="Output file path")
@click.pass_obj
def validate(config, logfile, expected_event: str | None, fmt: str, output_path: str | None) -> None:
    """Validate a verifier event log (use - for stdin)."""
    from vptestbed.testbed.request import InputError
    from vptestbed.verifier.service import validate_presentation_logs

    try:
        report = validate_presentation_logs(logfile.read(), expected_event)
    except InputError as e:
        click.echo(f"Invalid verifier log: {e}")
        raise SystemExit(1)

    emit_report(report, fmt, output_path, config.json_indent)


@verifier.command()
def events() -> None:
    """List the event kinds a verifier log may contain."""
    from vptestbed.verifier.events import EVENT_TYPES

    for kind, model in EVENT_TYPES.items():
        click.echo(f"  {kind:<45}{model.__name__}")


@verifier.command()
@click.option("--client-id", default=None, help="Verifier client_id")
@click.option("--request", "request_object", default=None, help="Request object JWT passed by value")
@click.option("--request-uri", default=None, help="URI the wallet fetches the request object from")
@click.option("--request-uri-method", default=None, type=click.Choice(["get", "post"]))
@click.option(
    "--init-response",
    default=None,
    type=click.File("r"),
    help="JSON init-transaction response to read the request details from",
)
@click.option("--scheme", default="openid4vp", help="URI scheme the wallet is registered for")
@click.option("--width", default=300, type=int, help="Image width in pixels")
@click.option("--height", default=300, type=int, help="Image height in pixels")
@click.option("--output", "output_path", required=True, help="PNG file to write")
def qr(
    client_id: str | None,
    request_object: str | None,
    request_uri: str | None,
    request_uri_method: str | None,
    init_response,
    scheme: str,
    width: int,
    height: int,
    output_path: str,
) -> None:
    """Write the authorization request URI as a QR code PNG."""
    import json

    from vptestbed.qr import generate_qr_png
    from vptestbed.verifier.authorization import (
        AuthorizationData,
        authorization_data_from_response,
        create_authorization_request_uri,
    )

    try:
        if init_response is not None:
            data = authorization_data_from_response(json.loads(init_response.read()))
        elif client_id is not None:
            data = AuthorizationData(
                client_id=client_id,
                request_object=request_object,
                request_uri=request_uri,
                request_uri_method=request_uri_method,
            )
        else:
            click.echo("Provide --client-id or --init-response.")
            raise SystemExit(1)
        uri = create_authorization_request_uri(scheme, data)
        png = generate_qr_png(uri, width, height)
    except ValueError as e:
        click.echo(f"Cannot build authorization request: {e}")
        raise SystemExit(1)

    with open(output_path, "wb") as f:
        f.write(png)
    click.echo(uri)
    click.echo(f"QR code written to {output_path}")
