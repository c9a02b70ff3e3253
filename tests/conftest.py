"""Shared fixtures for tests."""
from datetime import datetime

import pytest

import db


@pytest.fixture
def temp_db(tmp_path, monkeypatch):
    """sqlite store in a temporary directory."""
    monkeypatch.setattr(db, "DB_PATH", str(tmp_path / "checklist.db"))
    db.init_db()
    return db.DB_PATH


@pytest.fixture
def fixed_now():
    return datetime(2024, 3, 5, 14, 7, 9)


@pytest.fixture
def hotline_template():
    return {
        "id": "1",
        "name": "Hotline",
        "conditions": {"fase": "Hotline", "card_aprovado": "Sim"},
        "code": "HTSPT1",
        "comment": "Enviar ciclo 1 de hotline",
    }


@pytest.fixture
def hotline_answers():
    return {
        "fase": "Hotline",
        "card_aprovado": "Sim",
        "temos_hotline": "Não",
        "idioma": "🇧🇷 Português",
    }
