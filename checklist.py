# checklist.py
from typing import Dict, List, Tuple
from models import AnswerSet, FieldStatus, Question

CHECKLIST_QUESTIONS: List[Question] = [
    # Fase
    {"id": "fase", "question": "Fase", "options": ["Hotline", "1ª Tentativa", "2ª Tentativa", "3ª Tentativa", "Última Tentativa", "Prioridade", "Mediação", "Notificação Extrajudicial", "Tratativas Especiais", "Gerenciamento de Parceiros"], "section": "Fase", "required": True},

    # Checklist N1
    {"id": "card_aprovado", "question": "Card foi aprovado pelo cliente?", "options": ["Sim", "Não"], "section": "N1", "required": True},
    {"id": "nova_tentativa", "question": "É uma nova tentativa? Se sim, tivemos retorno no e-mail?", "options": ["Sim, com retorno", "Não", "Sim, sem retorno"], "section": "N1", "required": True},
    {"id": "outro_card", "question": "Existe outro card desse concorrente em fluxo?", "options": ["Sim", "Não"], "section": "N1", "required": True},
    {"id": "possui_etiqueta", "question": "Possui etiqueta de Prioridade, Concorrente não quer contato, Tratativa Atendimento ou NE Branddi?", "options": ["Sim", "Não"], "section": "N1", "required": True},
    {"id": "qual_etiqueta", "question": "Se sim, qual?", "options": ["Prioridade", "Concorrente não quer contato", "Tratativa Atendimento", "NE Branddi", "N/A"], "section": "N1", "required": False},
    {"id": "temos_hotline", "question": "Temos hotline?", "options": ["Sim", "Não"], "section": "N1", "required": True},

    # OPEC
    {"id": "site_remete_cliente", "question": "O site do concorrente ou o garimpo remetem a algum cliente?", "options": ["Sim", "Não"], "section": "OPEC", "required": True},
    {"id": "conferido_lista", "question": "Conferido na Lista de Clientes da Planilha", "options": ["Sim", "Não"], "section": "OPEC", "required": True},
    {"id": "lideranca_liberou", "question": "Se tiver relação, a liderança liberou a tratativa?", "options": ["Sim", "Não", "N/A"], "section": "OPEC", "required": False},
    {"id": "concorrente_lista_nao_contato", "question": "Concorrente está na lista de ❌ Concorrentes para não entrar em contato?", "options": ["Sim", "Não"], "section": "OPEC", "required": True},
    {"id": "agencias_parceiras", "question": "Concorrente está na lista de Agencias Parceiras?", "options": ["Sim", "Não"], "section": "OPEC", "required": True},

    # Linguagem
    {"id": "possui_print", "question": "Possui print?", "options": ["Sim", "Não"], "section": "Linguagem", "required": True},
    {"id": "idioma", "question": "Idioma", "options": ["🇧🇷 Português", "🇺🇸 Inglês", "🇪🇸 Espanhol"], "section": "Linguagem", "required": True},
]

SECTIONS: List[Tuple[str, str]] = [
    ("Fase", "Fase"),
    ("N1", "Checklist N1"),
    ("OPEC", "Checagens no site de OPEC"),
    ("Linguagem", "Linguagem"),
]

# Respostas que pedem atenção do operador
WARNING_ANSWERS: Dict[str, str] = {
    "concorrente_lista_nao_contato": "Sim",
    "card_aprovado": "Não",
    "nova_tentativa": "Sim, sem retorno",
}

STATUS_ICONS: Dict[str, str] = {
    "success": "✅",
    "error": "❌",
    "warning": "⚠️",
    "neutral": "",
}

def questions_for(section: str) -> List[Question]:
    return [q for q in CHECKLIST_QUESTIONS if q["section"] == section]

def question_ids() -> List[str]:
    return [q["id"] for q in CHECKLIST_QUESTIONS]

def field_status(question: Question, answers: AnswerSet) -> FieldStatus:
    value = answers.get(question["id"])
    if not value:
        return "error" if question.get("required") else "neutral"

    if WARNING_ANSWERS.get(question["id"]) == value:
        return "warning"
    return "success"

def progress(answers: AnswerSet) -> Tuple[int, int, float]:
    """Retorna (respondidas, total, porcentagem)."""
    answered = sum(1 for q in CHECKLIST_QUESTIONS if answers.get(q["id"]))
    total = len(CHECKLIST_QUESTIONS)
    return answered, total, answered / total * 100

def empty_form() -> dict:
    return {
        "answers": {},
        "raw_text": "",
        "contacts": [],
        "generated_code": "",
        "generated_comment": "",
    }
