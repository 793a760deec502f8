"""CLI entrypoint for vptestbed."""

import vptestbed.cli.issuer_cmd  # noqa: F401
import vptestbed.cli.verifier_cmd  # noqa: F401
from vptestbed.cli.main import cli


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
