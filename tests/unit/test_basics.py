import json
import random
from pathlib import Path

from topup_report import config
from topup_report.domain.schema import ORGANIZATION_SCHEMA, PERSON_SCHEMA, TypeTag
from topup_report.verifier import verify
from scripts import generate_data


def test_get_settings_defaults(monkeypatch):
    for name in (
        "DATA_DIR",
        "PEOPLE_SOURCE",
        "ORGANIZATIONS_SOURCE",
        "REPORT_OUTPUT",
        "LEGACY_BALANCE_LABEL",
    ):
        monkeypatch.delenv(name, raising=False)
    settings = config.get_settings()
    assert settings.people_source == "users.json"
    assert settings.organizations_source == "companies.json"
    assert settings.output_path == "output.txt"
    assert settings.legacy_balance_label is True


def test_settings_read_environment(monkeypatch, tmp_path: Path):
    monkeypatch.setenv("DATA_DIR", str(tmp_path))
    monkeypatch.setenv("LEGACY_BALANCE_LABEL", "false")
    settings = config.get_settings()
    assert settings.data_dir == tmp_path
    assert settings.legacy_balance_label is False


def test_settings_resolve_relative_and_absolute(tmp_path: Path):
    settings = config.Settings(data_dir=tmp_path)
    assert settings.resolve("users.json") == tmp_path / "users.json"
    absolute = tmp_path / "elsewhere" / "companies.json"
    assert settings.resolve(str(absolute)) == absolute


def test_generate_data_writes_valid_sources(tmp_path: Path):
    people_path, org_path = generate_data._write_sources(
        tmp_path, people=20, organizations=3, seed=123
    )
    people = json.loads(people_path.read_text(encoding="utf-8"))
    organizations = json.loads(org_path.read_text(encoding="utf-8"))

    assert len(people) == 20
    assert len(organizations) == 3
    assert verify(people, PERSON_SCHEMA) == people
    assert verify(organizations, ORGANIZATION_SCHEMA) == organizations


def test_generate_data_is_deterministic(tmp_path: Path):
    first, _ = generate_data._write_sources(tmp_path / "a", people=5, organizations=2, seed=7)
    second, _ = generate_data._write_sources(tmp_path / "b", people=5, organizations=2, seed=7)
    assert first.read_text(encoding="utf-8") == second.read_text(encoding="utf-8")


def test_generate_data_malformed_records_fail_verification(tmp_path: Path):
    people_path, _ = generate_data._write_sources(
        tmp_path, people=10, organizations=2, seed=1, malformed=1.0
    )
    people = json.loads(people_path.read_text(encoding="utf-8"))
    assert verify(people, PERSON_SCHEMA) == []


def test_generate_data_bad_emails_fail_email_tag():
    assert not any(TypeTag.EMAIL.accepts(email) for email in generate_data.BAD_EMAILS)


def test_generate_data_corrupts_person_emails():
    person = generate_data._generate_people(random.Random(0), 1, organizations=1)[0]

    broken = [generate_data._corrupt(random.Random(seed), person) for seed in range(50)]

    assert any(record.get("email") in generate_data.BAD_EMAILS for record in broken)
    assert verify(broken, PERSON_SCHEMA) == []


def test_generate_data_never_adds_email_to_organizations():
    organization = generate_data._generate_organizations(random.Random(0), 1)[0]

    broken = [generate_data._corrupt(random.Random(seed), organization) for seed in range(50)]

    assert all("email" not in record for record in broken)
    assert verify(broken, ORGANIZATION_SCHEMA) == []
