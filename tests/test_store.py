import json
import logging
import os
import sys
from datetime import date
from decimal import Decimal
from pathlib import Path

sys.path.insert(0, os.path.abspath(os.path.join(Path(__file__).resolve().parent, "..")))

import store
from factories import make_investment, make_payments


def test_round_trip(tmp_path):
    path = tmp_path / "data.json"
    invs = [
        make_investment(
            principal=Decimal("5000.10"),
            interest_rate=Decimal("8.25"),
            payments=make_payments(("2026-03-01", "0.1"), ("2026-01-01", 100)),
        ),
        make_investment(id="inv-2", frequency="half-yearly", status="closed"),
    ]
    assert store.save(invs, path)
    assert store.load(path) == invs


def test_persisted_layout(tmp_path):
    path = tmp_path / "data.json"
    store.save([make_investment(payments=make_payments(("2026-03-01", 50)))], path)
    record = json.loads(path.read_text())[0]
    assert record["interestRate"] == "12"
    assert record["startDate"] == "2026-01-01"
    assert record["payments"] == [{"id": "p1", "date": "2026-03-01", "amount": "50"}]


def test_load_accepts_numeric_amounts(tmp_path):
    path = tmp_path / "data.json"
    path.write_text(
        json.dumps(
            [
                {
                    "id": "x",
                    "name": "Bond",
                    "principal": 2000,
                    "interestRate": 5,
                    "frequency": "yearly",
                    "startDate": "2023-01-01",
                    "payments": [{"id": "p", "date": "2023-12-01", "amount": 2100}],
                    "status": "closed",
                }
            ]
        )
    )
    (inv,) = store.load(path)
    assert inv.principal == Decimal("2000")
    assert inv.payments[0].date == date(2023, 12, 1)
    assert inv.status == "closed"


def test_missing_file_is_empty(tmp_path):
    assert store.load(tmp_path / "missing.json") == []


def test_malformed_file_is_empty(tmp_path, caplog):
    path = tmp_path / "data.json"
    path.write_text("{not json")
    with caplog.at_level(logging.ERROR):
        assert store.load(path) == []
    assert "Error loading investments" in caplog.text


def test_invalid_record_is_empty(tmp_path, caplog):
    path = tmp_path / "data.json"
    path.write_text(json.dumps([{"id": "x", "frequency": "weekly"}]))
    with caplog.at_level(logging.ERROR):
        assert store.load(path) == []
    assert "Malformed investment data" in caplog.text


def test_save_failure_is_logged(tmp_path, caplog):
    with caplog.at_level(logging.ERROR):
        assert store.save([make_investment()], tmp_path) is False
    assert "Error saving investments" in caplog.text
