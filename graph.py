# graph.py
from datetime import datetime
from typing import List, Optional
from langgraph.graph import StateGraph, END
from models import AnswerSet, ChecklistState, Template
from extractor import extract_contacts
from generator import build_code, build_comment, match_template

def extract_node(state: ChecklistState) -> ChecklistState:
    raw_text = state.get("raw_text", "")
    state["contacts"] = extract_contacts(raw_text) if raw_text.strip() else []
    return state

def match_node(state: ChecklistState) -> ChecklistState:
    state["matched"] = match_template(state.get("answers", {}), state.get("templates", []))
    return state

def template_node(state: ChecklistState) -> ChecklistState:
    # Saída do template é usada como está, sem substituições
    state["code"] = state["matched"]["code"]
    state["comment"] = state["matched"]["comment"]
    return state

def synthesize_node(state: ChecklistState) -> ChecklistState:
    now = state.get("now") or datetime.now()
    answers = state.get("answers", {})
    state["now"] = now
    state["code"] = build_code(answers, now)
    state["comment"] = build_comment(answers, state.get("contacts", []), now)
    return state

def route(state: ChecklistState) -> str:
    return "template" if state.get("matched") is not None else "synthesize"

def create_graph():
    sg = StateGraph(ChecklistState)
    sg.add_node("extract", extract_node)
    sg.add_node("match", match_node)
    sg.add_node("template", template_node)
    sg.add_node("synthesize", synthesize_node)

    sg.set_entry_point("extract")
    sg.add_edge("extract", "match")
    sg.add_conditional_edges(
        "match",
        route,
        {"template": "template", "synthesize": "synthesize"},
    )
    sg.add_edge("template", END)
    sg.add_edge("synthesize", END)

    return sg.compile()

def refresh(graph, answers: AnswerSet, raw_text: str, templates: List[Template],
            now: Optional[datetime] = None) -> ChecklistState:
    initial_state: ChecklistState = {
        "answers": answers,
        "raw_text": raw_text,
        "templates": templates,
        "now": now or datetime.now(),
        "matched": None,
    }
    return graph.invoke(initial_state)
