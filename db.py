# db.py
import os
import json
import logging
import sqlite3
from contextlib import closing
from typing import Any, List, Optional
from models import AnswerSet, Contact, FormData, Template
from templates import default_templates, normalize_templates

logger = logging.getLogger(__name__)

DB_PATH = os.getenv("CHECKLIST_DB_PATH", "checklist.db")

FORM_DATA_KEY = "checklist-form-data"
TEMPLATES_KEY = "checklist-templates"

def init_db():
    os.makedirs(os.path.dirname(DB_PATH) or ".", exist_ok=True)
    with closing(sqlite3.connect(DB_PATH)) as con, con:
        con.execute("""
            CREATE TABLE IF NOT EXISTS records (
                key   TEXT PRIMARY KEY,
                value TEXT NOT NULL
            );
        """)

def load_record(key: str) -> Optional[str]:
    with closing(sqlite3.connect(DB_PATH)) as con, con:
        row = con.execute("SELECT value FROM records WHERE key=?", (key,)).fetchone()
    return row[0] if row else None

def save_record(key: str, value: Any):
    with closing(sqlite3.connect(DB_PATH)) as con, con:
        con.execute("""INSERT INTO records (key, value) VALUES (?, ?)
                       ON CONFLICT(key) DO UPDATE SET value=excluded.value""",
                    (key, json.dumps(value, ensure_ascii=False)))
        con.commit()

def delete_record(key: str):
    with closing(sqlite3.connect(DB_PATH)) as con, con:
        con.execute("DELETE FROM records WHERE key=?", (key,))
        con.commit()

def _load_json(key: str) -> Any:
    raw = load_record(key)
    if raw is None:
        return None
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        logger.warning("Erro ao carregar %s: JSON inválido, usando padrão", key)
        return None

def load_form_data() -> FormData:
    data = _load_json(FORM_DATA_KEY)
    if not isinstance(data, dict):
        if data is not None:
            logger.warning("Erro ao carregar %s: formato inesperado", FORM_DATA_KEY)
        return {"answers": {}, "raw_text": "", "contacts": []}

    answers = data.get("answers")
    raw_text = data.get("raw_text")
    contacts = data.get("contacts")
    return {
        "answers": {k: v for k, v in answers.items() if isinstance(v, str)} if isinstance(answers, dict) else {},
        "raw_text": raw_text if isinstance(raw_text, str) else "",
        "contacts": [
            {"name": c["name"], "email": c["email"]}
            for c in contacts
            if isinstance(c, dict) and isinstance(c.get("name"), str) and isinstance(c.get("email"), str)
        ] if isinstance(contacts, list) else [],
    }

def save_form_data(answers: AnswerSet, raw_text: str, contacts: List[Contact]):
    save_record(FORM_DATA_KEY, {"answers": answers, "raw_text": raw_text, "contacts": contacts})

def clear_form_data():
    # Templates ficam preservados
    delete_record(FORM_DATA_KEY)

def load_templates() -> List[Template]:
    raw = _load_json(TEMPLATES_KEY)
    templates = normalize_templates(raw)
    if templates is None:
        if raw is not None:
            logger.warning("Erro ao carregar %s: formato inesperado", TEMPLATES_KEY)
        return default_templates()
    return templates

def save_templates(templates: List[Template]):
    save_record(TEMPLATES_KEY, templates)
