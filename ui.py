# ui.py
import json
import logging
import streamlit as st
import pandas as pd
from models import AnswerSet, Question
from checklist import (CHECKLIST_QUESTIONS, SECTIONS, STATUS_ICONS, empty_form,
                       field_status, progress, questions_for)
from extractor import contact_emails
from templates import add_template, conditions_from_answers, remove_template
from db import clear_form_data, load_form_data, load_templates, save_form_data, save_templates
from graph import create_graph, refresh
from clipboard import render_copy_button

logger = logging.getLogger(__name__)

RAW_TEXT_KEY = "raw_text_input"

def _field_key(question_id: str) -> str:
    return f"q_{question_id}"

@st.cache_resource
def get_graph():
    return create_graph()

def _inputs_signature(answers: AnswerSet, raw_text: str, templates) -> str:
    return json.dumps([answers, raw_text, templates], sort_keys=True, ensure_ascii=False)

def _form_payload(answers: AnswerSet, raw_text: str, contacts) -> str:
    return json.dumps([answers, raw_text, contacts], sort_keys=True, ensure_ascii=False)

def init_session_state():
    if "initialized" in st.session_state:
        return

    # Carrega dados salvos uma única vez por sessão
    saved = load_form_data()
    for key, value in empty_form().items():
        st.session_state[key] = value
    st.session_state.answers = saved["answers"]
    st.session_state.raw_text = saved["raw_text"]
    st.session_state.contacts = saved["contacts"]
    st.session_state.templates = load_templates()
    st.session_state.last_inputs = None
    st.session_state.last_saved = _form_payload(saved["answers"], saved["raw_text"], saved["contacts"])

    for q in CHECKLIST_QUESTIONS:
        st.session_state[_field_key(q["id"])] = saved["answers"].get(q["id"])
    st.session_state[RAW_TEXT_KEY] = saved["raw_text"]
    st.session_state.initialized = True

def clear_all():
    for key, value in empty_form().items():
        st.session_state[key] = value
    for q in CHECKLIST_QUESTIONS:
        st.session_state[_field_key(q["id"])] = None
    st.session_state[RAW_TEXT_KEY] = ""

    # Nada a regenerar nem salvar até a próxima alteração
    st.session_state.last_inputs = _inputs_signature({}, "", st.session_state.templates)
    st.session_state.last_saved = _form_payload({}, "", [])
    clear_form_data()
    st.toast("Todos os dados foram limpos", icon="🧹")

def render_progress():
    answered, total, percentage = progress(st.session_state.answers)
    cols = st.columns([3, 1])
    with cols[0]:
        st.subheader("Checklist de Verificação")
    with cols[1]:
        st.metric("Respondidas", f"{answered}/{total}", f"{round(percentage)}%", delta_color="off")
    st.progress(answered / total)

def render_select_field(question: Question):
    key = _field_key(question["id"])
    current = st.session_state.get(key)
    options = list(question["options"])
    if current and current not in options:
        # Valor digitado pelo operador
        options.append(current)

    status = field_status(question, st.session_state.answers)
    label = question["question"]
    if question.get("required"):
        label += " *"
    if STATUS_ICONS[status]:
        label += f" {STATUS_ICONS[status]}"

    st.selectbox(
        label,
        options,
        index=None,
        key=key,
        placeholder="Digite ou selecione uma opção",
        accept_new_options=True,
    )

def collect_inputs():
    # Os widgets já estão no session_state antes de serem desenhados
    answers: AnswerSet = {}
    for q in CHECKLIST_QUESTIONS:
        value = st.session_state.get(_field_key(q["id"]))
        if value:
            answers[q["id"]] = value
    st.session_state.answers = answers
    st.session_state.raw_text = st.session_state.get(RAW_TEXT_KEY, "")

def render_form():
    with st.container(border=True):
        for section, title in SECTIONS:
            st.markdown(f"#### {title}")
            for question in questions_for(section):
                render_select_field(question)

def render_contact_input():
    st.subheader("📇 Contatos")
    st.text_area(
        "Cole aqui as linhas da planilha (ou texto com e-mails)",
        key=RAW_TEXT_KEY,
        height=160,
    )

def render_contacts_table():
    contacts = st.session_state.contacts
    if not contacts:
        st.caption("Nenhum contato extraído")
        return

    df = pd.DataFrame(contacts, columns=["name", "email"]).rename(
        columns={"name": "Nome", "email": "E-mail"}
    )
    st.dataframe(df, width="stretch", hide_index=True)
    st.caption(f"{len(df)} contato(s) extraído(s)")

def update_outputs():
    answers = st.session_state.answers
    raw_text = st.session_state.raw_text
    templates = st.session_state.templates

    signature = _inputs_signature(answers, raw_text, templates)
    if signature == st.session_state.last_inputs:
        return

    result = refresh(get_graph(), answers, raw_text, templates)
    st.session_state.contacts = result["contacts"]
    st.session_state.generated_code = result["code"]
    st.session_state.generated_comment = result["comment"]
    st.session_state.last_inputs = signature

    payload = _form_payload(answers, raw_text, result["contacts"])
    if payload != st.session_state.last_saved:
        save_form_data(answers, raw_text, result["contacts"])
        st.session_state.last_saved = payload
        logger.debug("Dados do formulário salvos")

def render_results():
    st.subheader("Resultados Gerados")
    code = st.session_state.generated_code
    comment = st.session_state.generated_comment
    emails = contact_emails(st.session_state.contacts)

    cols = st.columns(2)
    with cols[0]:
        st.markdown("**Código gerado**")
        st.code(code or "Aguardando respostas...", language=None)
        render_copy_button(code, "Código")
    with cols[1]:
        st.markdown("**Email dos contatos**")
        st.code(emails or "Nenhum contato extraído", language=None, wrap_lines=True)
        render_copy_button(emails, "Emails")

    st.markdown("**Comentário gerado**")
    st.code(comment or "Aguardando respostas...", language=None, wrap_lines=True)
    render_copy_button(comment, "Comentário")

def _templates_dataframe(templates) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {
                "Nome": t["name"],
                "Condições": "; ".join(f"{k} = {v}" for k, v in t["conditions"].items()),
                "Código": t["code"],
                "Comentário": t["comment"],
            }
            for t in templates
        ],
        columns=["Nome", "Condições", "Código", "Comentário"],
    )

def render_templates():
    templates = st.session_state.templates
    with st.expander("⚙️ Templates", expanded=False):
        if templates:
            st.dataframe(_templates_dataframe(templates), width="stretch", hide_index=True)
        else:
            st.caption("Nenhum template salvo")

        answers = st.session_state.answers
        answered_ids = [q["id"] for q in CHECKLIST_QUESTIONS if answers.get(q["id"])]

        with st.form("new_template", clear_on_submit=True):
            st.markdown("**Novo template a partir das respostas atuais**")
            name = st.text_input("Nome")
            code = st.text_input("Código")
            comment = st.text_area("Comentário")
            selected = st.multiselect(
                "Condições",
                answered_ids,
                default=answered_ids,
                format_func=lambda qid: f"{qid} = {answers[qid]}",
            )
            if st.form_submit_button("Salvar template"):
                try:
                    updated = add_template(templates, name, conditions_from_answers(answers, selected), code, comment)
                except ValueError as e:
                    st.error(str(e))
                else:
                    st.session_state.templates = updated
                    save_templates(updated)
                    st.success("Template salvo!")
                    st.rerun()

        if templates:
            template_id = st.selectbox(
                "Remover template",
                [t["id"] for t in templates],
                format_func=lambda tid: next(t["name"] for t in templates if t["id"] == tid),
            )
            if st.button("Remover"):
                updated = remove_template(templates, template_id)
                st.session_state.templates = updated
                save_templates(updated)
                st.rerun()

def render_clear_button():
    st.button("🔄 Apagar Tudo", type="primary", key="clear_all", on_click=clear_all, width="stretch")
