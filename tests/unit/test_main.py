import json

import pytest

from flightmail.main import main, process_emails


@pytest.fixture
def email_file(tmp_path, united_email):
    path = tmp_path / "emails.json"
    newsletter = {"from": "news@example.org", "subject": "Weekly news", "body": "Nothing to see"}
    path.write_text(json.dumps({"emails": [united_email, newsletter]}), encoding="utf-8")
    return path


def test_process_emails_keeps_order(united_email, model_spy):
    results = process_emails([united_email, {}], model_fallback=model_spy, verbose=False)

    assert results[0]["parserUsed"] == "united"
    assert results[0]["subject"] == "Your trip confirmation"
    assert results[1]["success"] is False
    assert len(model_spy.calls) == 1


def test_process_emails_as_records(united_email, model_spy):
    records = process_emails([united_email], model_fallback=model_spy, as_records=True, verbose=False)

    assert records[0]["parserUsed"] == "united"
    assert records[0]["dates"] == ["2024-01-15"]


def test_main_writes_results(tmp_path, email_file, monkeypatch):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    output = tmp_path / "out" / "flights.json"

    code = main(["--input", str(email_file), "--output", str(output), "--no-llm", "--quiet"])

    assert code == 0
    data = json.loads(output.read_text(encoding="utf-8"))
    assert data["metadata"]["email_count"] == 2
    assert data["metadata"]["parsed_count"] == 1
    assert data["results"][0]["flight"]["origin"] == "IAD"
    assert data["results"][1]["errorKind"] == "backend_unavailable"


def test_main_records_mode(tmp_path, email_file):
    output = tmp_path / "records.json"

    main(["--input", str(email_file), "--output", str(output), "--no-llm", "--quiet", "--records"])

    data = json.loads(output.read_text(encoding="utf-8"))
    assert data["results"][0]["name"] == "CDG"
    assert data["results"][1]["name"] == "Unknown Destination"


def test_main_unreadable_input(tmp_path):
    code = main(["--input", str(tmp_path / "missing.json"), "--output", str(tmp_path / "o.json"), "--no-llm"])

    assert code == 1
