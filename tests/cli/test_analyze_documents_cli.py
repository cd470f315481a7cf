"""Tests for the analyze documents CLI."""
import json

import pytest

from conftest import BUCKET, DOCUMENT_KEY, SELFIE_KEY
from kyc_analysis.cli import analyze_documents as cli


def test_main_prints_analysis(monkeypatch, capsys):
    received = []

    def fake_handle_request(body):
        received.append(json.loads(body))
        return {"statusCode": 200, "headers": {}, "body": '{"message": "KYC Documents Analysis Results"}'}

    monkeypatch.setattr(cli, "handle_request", fake_handle_request)

    with pytest.raises(SystemExit) as exc_info:
        cli.main(["--bucket", BUCKET, "--selfie", SELFIE_KEY, "--document", DOCUMENT_KEY])

    assert exc_info.value.code == 0
    assert received == [{"bucket": BUCKET, "selfieImage": SELFIE_KEY, "documentImage": DOCUMENT_KEY}]
    assert json.loads(capsys.readouterr().out) == {"message": "KYC Documents Analysis Results"}


def test_main_exits_with_error_on_failure(monkeypatch):
    monkeypatch.setattr(cli, "handle_request",
                        lambda body: {"statusCode": 500, "headers": {}, "body": ""})

    with pytest.raises(SystemExit) as exc_info:
        cli.main(["--bucket", BUCKET, "--selfie", SELFIE_KEY, "--document", DOCUMENT_KEY])

    assert exc_info.value.code == 1
