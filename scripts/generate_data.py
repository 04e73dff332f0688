"""
Synthetic data generator for the top-up report.

Writes deterministic pseudo-random people and organization JSON arrays. A
fraction of records can be deliberately malformed (missing fields, wrong
types, bad emails) to exercise schema verification.
"""

from __future__ import annotations

import json
import random
import sys
import time
from pathlib import Path
from typing import Any, Dict, List

import typer

app = typer.Typer(help="Generate synthetic people and organization JSON sources.")

FIRST_NAMES = ["Ada", "Grace", "Linus", "Ken", "Barbara", "Alan", "Edsger", "Margaret"]
LAST_NAMES = ["Lovelace", "Hopper", "Torvalds", "Thompson", "Liskov", "Turing", "Dijkstra"]
ORG_WORDS = ["Acme", "Globex", "Initech", "Umbrella", "Hooli", "Vandelay", "Stark"]
BAD_EMAILS = ["user@@example.com", "user@com", "no-at-sign.example.com", "user@exa_mple.com"]


def _generate_organizations(rng: random.Random, count: int) -> List[Dict[str, Any]]:
    return [
        {
            "id": i,
            "name": f"{rng.choice(ORG_WORDS)} {rng.choice(['Corp', 'Labs', 'Ltd'])}",
            "top_up": rng.randint(1, 100),
            "email_status": rng.choice([True, False]),
        }
        for i in range(1, count + 1)
    ]


def _generate_people(rng: random.Random, count: int, organizations: int) -> List[Dict[str, Any]]:
    people = []
    for i in range(1, count + 1):
        first = rng.choice(FIRST_NAMES)
        last = rng.choice(LAST_NAMES)
        people.append(
            {
                "id": i,
                "first_name": first,
                "last_name": last,
                "email": f"{first}.{last}{i}@example.com".lower(),
                # a few people point at organizations that do not exist
                "company_id": rng.randint(1, organizations + 1),
                "email_status": rng.choice([True, False]),
                "active_status": rng.choice([True, True, False]),
                "tokens": rng.randint(0, 100),
            }
        )
    return people


def _corrupt(rng: random.Random, record: Dict[str, Any]) -> Dict[str, Any]:
    """Break a record so it can no longer satisfy its schema."""
    broken = dict(record)
    modes = ["drop", "stringify"] + (["email"] if "email" in broken else [])
    mode = rng.choice(modes)
    if mode == "drop":
        del broken[rng.choice(sorted(broken))]
    elif mode == "email":
        broken["email"] = rng.choice(BAD_EMAILS)
    else:
        field = rng.choice(sorted(k for k, v in broken.items() if not isinstance(v, str)))
        broken[field] = str(broken[field])
    return broken


def _apply_malformed(
    rng: random.Random, records: List[Dict[str, Any]], fraction: float
) -> List[Dict[str, Any]]:
    return [_corrupt(rng, r) if rng.random() < fraction else r for r in records]


def _write_sources(
    output_dir: Path,
    people: int,
    organizations: int,
    seed: int,
    malformed: float = 0.0,
) -> tuple[Path, Path]:
    rng = random.Random(seed)
    org_records = _generate_organizations(rng, organizations)
    people_records = _generate_people(rng, people, organizations)
    if malformed:
        org_records = _apply_malformed(rng, org_records, malformed)
        people_records = _apply_malformed(rng, people_records, malformed)

    output_dir.mkdir(parents=True, exist_ok=True)
    people_path = output_dir / "users.json"
    org_path = output_dir / "companies.json"
    with people_path.open("w", encoding="utf-8") as f:
        json.dump(people_records, f, indent=2)
    with org_path.open("w", encoding="utf-8") as f:
        json.dump(org_records, f, indent=2)
    return people_path, org_path


@app.command()
def main(
    people: int = typer.Option(
        50,
        "--people",
        "-p",
        help="Number of people to generate.",
    ),
    organizations: int = typer.Option(
        5,
        "--organizations",
        "-o",
        help="Number of organizations to generate.",
    ),
    seed: int = typer.Option(
        42,
        "--seed",
        help="Deterministic RNG seed.",
    ),
    malformed: float = typer.Option(
        0.0,
        "--malformed",
        "-m",
        min=0.0,
        max=1.0,
        help="Fraction of records to corrupt.",
    ),
    output_dir: Path = typer.Option(
        Path("."),
        "--output-dir",
        "-d",
        help="Directory for users.json and companies.json.",
    ),
) -> None:
    """
    Generate people and organization JSON sources.
    """
    start = time.perf_counter()
    people_path, org_path = _write_sources(
        output_dir, people=people, organizations=organizations, seed=seed, malformed=malformed
    )
    duration = time.perf_counter() - start
    typer.echo(
        f"Wrote {people:,} people -> {people_path} and {organizations:,} organizations -> "
        f"{org_path} in {duration:.2f}s (seed={seed}, malformed={malformed:.0%})"
    )


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)
