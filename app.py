# app.py
# ------------------------------------------------------------
# Checklist de Verificação (Streamlit + LangGraph)
# ------------------------------------------------------------
import os
import logging
import streamlit as st
from db import init_db
from ui import (init_session_state, collect_inputs, update_outputs, render_progress,
                render_form, render_contact_input, render_contacts_table,
                render_results, render_templates, render_clear_button)

# ====== 0. Log / variáveis de ambiente ========================================
logging.basicConfig(
    level=os.getenv("CHECKLIST_LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# ====== 1. Inicialização ======================================================
st.set_page_config(page_title="Checklist de Verificação", page_icon="✅", layout="wide")
init_db()
init_session_state()

# ====== 2. Recalcula código e comentário ======================================
collect_inputs()
update_outputs()

# ====== 3. Streamlit UI =======================================================
render_progress()
render_form()
render_contact_input()
render_contacts_table()
render_results()
render_templates()
render_clear_button()
