"""
Pytest configuration for the top-up report.

Provides fixtures for:
- Well-formed people and organization records
- Writing JSON sources into a temporary data directory
- Settings pointed at that directory
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Dict, List

import pytest

from topup_report.config import Settings, get_settings


def make_person(**overrides: Any) -> Dict[str, Any]:
    person = {
        "id": 1,
        "first_name": "A",
        "last_name": "B",
        "email": "a@b.com",
        "company_id": 5,
        "email_status": True,
        "active_status": True,
        "tokens": 100,
    }
    person.update(overrides)
    return person


def make_organization(**overrides: Any) -> Dict[str, Any]:
    organization = {"id": 5, "name": "Acme", "top_up": 20, "email_status": True}
    organization.update(overrides)
    return organization


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """
    Settings are cached per process; reset between tests so env overrides apply.
    """
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def write_json(tmp_path: Path) -> Callable[[str, Any], Path]:
    """
    Write a JSON-serializable value (or raw text) into the temp data directory.
    """

    def _write(name: str, data: Any) -> Path:
        path = tmp_path / name
        text = data if isinstance(data, str) else json.dumps(data)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings rooted at the per-test temporary directory.
    """
    return Settings(
        data_dir=tmp_path,
        people_source="users.json",
        organizations_source="companies.json",
        output_path="output.txt",
        log_level="DEBUG",
    )


@pytest.fixture
def sample_sources(write_json: Callable[[str, Any], Path]) -> List[Path]:
    """
    A small, mixed-quality dataset: three valid organizations, valid and invalid people.
    """
    people = [
        make_person(id=1, last_name="Zed", first_name="Zoe", email="zoe@acme.com", tokens=10),
        make_person(id=2, last_name="Abel", first_name="Al", email="al@acme.com", tokens=5),
        make_person(id=3, last_name="Moss", email_status=False, tokens=0),
        make_person(id=4, last_name="Idle", active_status=False),
        make_person(id=5, company_id=99),
        make_person(id=6, company_id=7, last_name="Other", tokens=1),
        {"id": 7, "first_name": "No", "last_name": "Email"},
        make_person(id=8, tokens="100"),
        "not a record",
    ]
    organizations = [
        make_organization(id=5, name="Acme", top_up=10),
        make_organization(id=6, name="Empty Co", top_up=50),
        make_organization(id=7, name="Globex", top_up=3, email_status=False),
        make_organization(id="8", name="Bad Id"),
    ]
    return [write_json("users.json", people), write_json("companies.json", organizations)]


@pytest.fixture
def person() -> Callable[..., Dict[str, Any]]:
    """Factory for a valid person record with field overrides."""
    return make_person


@pytest.fixture
def organization() -> Callable[..., Dict[str, Any]]:
    """Factory for a valid organization record with field overrides."""
    return make_organization
