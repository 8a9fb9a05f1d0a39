import json

import pytest

from flightmail.storage.email_storage import EmailStorage, EmailStorageError


def _write_email_file(path, emails):
    payload = {
        "metadata": {
            "fetch_date": "2026-02-10T10:00:00",
            "email_count": len(emails),
        },
        "emails": emails,
    }
    with open(path, "w", encoding="utf-8") as f:
        json.dump(payload, f)


def test_load_emails_specific_file(tmp_path):
    storage = EmailStorage(storage_dir=str(tmp_path))
    target = tmp_path / "emails_2026_999.json"
    _write_email_file(target, [{"id": "only"}])

    emails = storage.load_emails(str(target))

    assert emails == [{"id": "only"}]


def test_load_emails_specific_relative_file(tmp_path):
    storage = EmailStorage(storage_dir=str(tmp_path))
    _write_email_file(tmp_path / "emails_2026_123.json", [{"id": "relative"}])

    emails = storage.load_emails("emails_2026_123.json")

    assert emails == [{"id": "relative"}]


def test_load_emails_bare_list(tmp_path):
    storage = EmailStorage(storage_dir=str(tmp_path))
    target = tmp_path / "list.json"
    target.write_text(json.dumps([{"id": "a"}, {"id": "b"}]), encoding="utf-8")

    assert [email["id"] for email in storage.load_emails(str(target))] == ["a", "b"]


def test_load_emails_missing_file(tmp_path):
    storage = EmailStorage(storage_dir=str(tmp_path))

    with pytest.raises(EmailStorageError):
        storage.load_emails("nope.json")


def test_load_emails_invalid_json(tmp_path):
    storage = EmailStorage(storage_dir=str(tmp_path))
    target = tmp_path / "broken.json"
    target.write_text("{not json", encoding="utf-8")

    with pytest.raises(EmailStorageError):
        storage.load_emails(str(target))


def test_save_results(tmp_path):
    storage = EmailStorage(storage_dir=str(tmp_path))
    output = tmp_path / "processed" / "flights.json"
    results = [
        {"success": True, "parserUsed": "united"},
        {"success": False, "parserUsed": "generic"},
    ]

    saved = storage.save_results(results, str(output), email_count=3)

    assert saved == str(output)
    data = json.loads(output.read_text(encoding="utf-8"))
    assert data["metadata"]["email_count"] == 3
    assert data["metadata"]["parsed_count"] == 1
    assert "process_date" in data["metadata"]
    assert data["results"] == results
