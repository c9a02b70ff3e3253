"""End-to-end tests for the Streamlit app script."""
from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

import db

APP_PATH = str(Path(__file__).resolve().parent.parent / "app.py")


@pytest.fixture
def app(temp_db, hotline_template):
    """App with a stored template and an empty form record."""
    db.save_templates([hotline_template])
    at = AppTest.from_file(APP_PATH, default_timeout=30)
    at.run()
    return at


def _fill(at):
    at.selectbox(key="q_card_aprovado").select("Sim").run()
    at.text_area(key="raw_text_input").input("Jane Doe jane@example.com").run()


def test_change_regenerates_and_persists(app):
    _fill(app)

    assert not app.exception
    assert app.session_state["answers"] == {"card_aprovado": "Sim"}
    assert app.session_state["contacts"] == [{"name": "Jane Doe", "email": "jane@example.com"}]
    assert app.session_state["generated_code"].startswith("CHK_APR_")
    assert "Jane Doe | | jane@example.com" in app.session_state["generated_comment"]

    saved = db.load_form_data()
    assert saved["answers"] == {"card_aprovado": "Sim"}
    assert saved["raw_text"] == "Jane Doe jane@example.com"
    assert saved["contacts"] == [{"name": "Jane Doe", "email": "jane@example.com"}]


def test_rerun_without_changes_keeps_code(app):
    _fill(app)
    code = app.session_state["generated_code"]

    app.run()

    assert app.session_state["generated_code"] == code


def test_matching_template_output(app):
    app.selectbox(key="q_fase").select("Hotline").run()
    app.selectbox(key="q_card_aprovado").select("Sim").run()

    assert app.session_state["generated_code"] == "HTSPT1"
    assert app.session_state["generated_comment"] == "Enviar ciclo 1 de hotline"


def test_clear_all(app, hotline_template):
    _fill(app)
    assert db.load_record(db.FORM_DATA_KEY) is not None

    app.button(key="clear_all").click().run()

    assert not app.exception
    assert app.session_state["answers"] == {}
    assert app.session_state["raw_text"] == ""
    assert app.session_state["contacts"] == []
    assert app.session_state["generated_code"] == ""
    assert app.session_state["generated_comment"] == ""
    assert app.selectbox(key="q_card_aprovado").value is None
    assert app.text_area(key="raw_text_input").value == ""

    assert db.load_record(db.FORM_DATA_KEY) is None
    assert db.load_templates() == [hotline_template]
    assert app.session_state["templates"] == [hotline_template]
