"""Tests for the vptestbed CLI."""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from vptestbed import config as testbed_config
from vptestbed.__main__ import cli

TS = "2025-03-01T10:00:00Z"
W = {"vp_token": "abc"}


@pytest.fixture(autouse=True)
def isolated_testbed_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Redirect ~/.vptestbed/ to a temp dir for test isolation."""
    testbed_dir = tmp_path / ".vptestbed"
    testbed_dir.mkdir()
    monkeypatch.setattr(testbed_config, "TESTBED_DIR", testbed_dir)
    yield testbed_dir


def write_log(path: Path, *events: dict) -> Path:
    path.write_text(json.dumps({"transaction_id": "tx-1", "last_updated": 0, "events": list(events)}))
    return path


def matching_events() -> list[dict]:
    return [
        {"timestamp": TS, "event": "Wallet response posted", "actor": "Wallet", "wallet_response": W},
        {"timestamp": TS, "event": "Verifier got wallet response", "actor": "Verifier", "wallet_response": W},
    ]


def test_verifier_validate_success(tmp_path: Path):
    log_path = write_log(tmp_path / "log.json", *matching_events())
    result = CliRunner().invoke(cli, ["verifier", "validate", str(log_path)])

    assert result.exit_code == 0
    report = json.loads(result.output)
    assert report["result"] == "SUCCESS"
    assert report["counters"] == {"error_count": 0, "warning_count": 0}


def test_verifier_validate_failure_exits_nonzero(tmp_path: Path):
    log_path = write_log(tmp_path / "log.json", matching_events()[0])
    result = CliRunner().invoke(cli, ["verifier", "validate", str(log_path), "--format", "text"])

    assert result.exit_code == 1
    assert "Result: FAILURE" in result.output
    assert "Wallet query and verifier query do not match" in result.output


def test_verifier_validate_expected_event_from_stdin():
    text = json.dumps(
        {
            "transaction_id": "tx-1",
            "last_updated": 0,
            "events": [
                {"timestamp": TS, "event": "Wallet failed to post response", "actor": "Wallet", "cause": "bad cert"}
            ],
        }
    )
    result = CliRunner().invoke(
        cli,
        ["verifier", "validate", "-", "--expected-event", "certificate_error", "--format", "text"],
        input=text,
    )

    assert result.exit_code == 0
    assert "Result: SUCCESS" in result.output
    assert "  bad cert" in result.output


def test_verifier_validate_writes_output_file(tmp_path: Path):
    log_path = write_log(tmp_path / "log.json", *matching_events())
    out_path = tmp_path / "report.json"
    result = CliRunner().invoke(cli, ["verifier", "validate", str(log_path), "--output", str(out_path)])

    assert result.exit_code == 0
    assert json.loads(out_path.read_text())["result"] == "SUCCESS"


def test_verifier_validate_invalid_log(tmp_path: Path):
    log_path = tmp_path / "log.json"
    log_path.write_text("{}")
    result = CliRunner().invoke(cli, ["verifier", "validate", str(log_path)])

    assert result.exit_code == 1
    assert "Invalid verifier log" in result.output


def test_verifier_events_lists_kinds():
    result = CliRunner().invoke(cli, ["verifier", "events"])
    assert result.exit_code == 0
    assert "Attestation status check failed" in result.output
    assert "AttestationStatusCheckFailed" in result.output


def test_issuer_validate(tmp_path: Path):
    log_path = tmp_path / "issuer.json"
    log_path.write_text(json.dumps({"successful": False, "count": 0, "logs": []}))
    result = CliRunner().invoke(cli, ["issuer", "validate", str(log_path)])

    assert result.exit_code == 1
    assert json.loads(result.output)["result"] == "FAILURE"


def test_config_indent_is_applied(tmp_path: Path, isolated_testbed_dir: Path):
    (isolated_testbed_dir / "config.yaml").write_text("json_indent: null\n")
    log_path = write_log(tmp_path / "log.json", *matching_events())
    result = CliRunner().invoke(cli, ["verifier", "validate", str(log_path)])

    assert result.exit_code == 0
    assert result.output.count("\n") == 1


def test_verifier_qr_from_options(tmp_path: Path):
    out_path = tmp_path / "qr.png"
    result = CliRunner().invoke(
        cli,
        [
            "verifier", "qr",
            "--client-id", "verifier.example",
            "--request-uri", "https://verifier.example/request",
            "--request-uri-method", "get",
            "--output", str(out_path),
        ],
    )

    assert result.exit_code == 0
    assert (
        "openid4vp://?client_id=verifier.example"
        "&request_uri=https%3A%2F%2Fverifier.example%2Frequest&request_uri_method=get"
    ) in result.output
    assert out_path.read_bytes()[:4] == b"\x89PNG"


def test_verifier_qr_from_init_response(tmp_path: Path):
    init_path = tmp_path / "init.json"
    init_path.write_text(json.dumps({"transaction_id": "tx-1", "client_id": "c", "request": "eyJ.jwt"}))
    out_path = tmp_path / "qr.png"
    result = CliRunner().invoke(
        cli,
        ["verifier", "qr", "--init-response", str(init_path), "--scheme", "eudi-openid4vp", "--output", str(out_path)],
    )

    assert result.exit_code == 0
    assert "eudi-openid4vp://?client_id=c&request=eyJ.jwt" in result.output
    assert out_path.exists()


def test_verifier_qr_requires_client_id(tmp_path: Path):
    out_path = tmp_path / "qr.png"
    result = CliRunner().invoke(cli, ["verifier", "qr", "--output", str(out_path)])

    assert result.exit_code == 1
    assert "Provide --client-id or --init-response." in result.output
    assert not out_path.exists()


def test_verifier_qr_rejects_bad_size(tmp_path: Path):
    result = CliRunner().invoke(
        cli, ["verifier", "qr", "--client-id", "c", "--width", "0", "--output", str(tmp_path / "qr.png")]
    )

    assert result.exit_code == 1
    assert "Cannot build authorization request" in result.output
