# generator.py
import logging
from datetime import datetime
from typing import List, Optional, Tuple
from models import AnswerSet, Contact, Template

logger = logging.getLogger(__name__)

APPROVED_ANSWER = "Sim"
NOT_ANSWERED = "**[Não respondido]**"
CONTACT_PLACEHOLDER = "[Nome do contato] | | [E-mail do contato]"

N1_LINES = [
    ("Card foi aprovado pelo cliente?", "card_aprovado"),
    ("É uma nova tentativa? Se sim, tivemos retorno no e-mail?", "nova_tentativa"),
    ("Existe outro card desse concorrente em fluxo?", "outro_card"),
    ("Possui etiqueta de Prioridade, Concorrente não quer contato, Tratativa Atendimento ou NE Branddi?", "possui_etiqueta"),
    ("Se sim, qual?", "qual_etiqueta"),
    ("Temos hotline?", "temos_hotline"),
]

OPEC_LINES = [
    ("O site do concorrente ou o garimpo remetem a algum cliente?", "site_remete_cliente"),
    ("Conferido na Lista de Clientes da Planilha", "conferido_lista"),
    ("Se tiver relação, a liderança liberou a tratativa?", "lideranca_liberou"),
    ("Concorrente está na lista de ❌ Concorrentes para não entrar em contato?", "concorrente_lista_nao_contato"),
    ("Concorrente está na lista de Agencias Parceiras?", "agencias_parceiras"),
]

def matches(template: Template, answers: AnswerSet) -> bool:
    # Respostas extras que não estão nas condições são ignoradas
    return all(
        key in answers and answers[key] == value
        for key, value in template["conditions"].items()
    )

def match_template(answers: AnswerSet, templates: List[Template]) -> Optional[Template]:
    # Ordem salva define a prioridade: o primeiro que casa vence
    for template in templates:
        if matches(template, answers):
            logger.debug("Template %s (%s) corresponde às respostas", template["id"], template["name"])
            return template
    return None

def build_code(answers: AnswerSet, now: datetime) -> str:
    status = "APR" if answers.get("card_aprovado") == APPROVED_ANSWER else "REJ"
    return f"CHK_{status}_{now.strftime('%Y%m%d_%H%M%S')}"

def format_answer(answer: Optional[str]) -> str:
    return f"**{answer}**" if answer else NOT_ANSWERED

def build_comment(answers: AnswerSet, contacts: List[Contact], now: datetime) -> str:
    fase = answers.get("fase") or "[Fase]"
    date_string = now.strftime("%d/%m/%Y")

    comment = f"[Nome do responsavel]| tentativa {fase} enviada em {date_string}\n\n"

    comment += "**Checklist N1:**\n"
    for label, key in N1_LINES:
        comment += f"{label} {format_answer(answers.get(key))}\n"
    comment += "\n"

    comment += "**Checagens no site de OPEC:**\n"
    for label, key in OPEC_LINES:
        comment += f"{label} {format_answer(answers.get(key))}\n"
    comment += "\n"

    comment += "**Tratativas**\n"
    if contacts:
        for contact in contacts:
            comment += f"{contact['name']} | | {contact['email']}\n"
    else:
        comment += f"{CONTACT_PLACEHOLDER}\n"

    return comment

def generate(answers: AnswerSet, contacts: List[Contact], templates: List[Template],
             now: Optional[datetime] = None) -> Tuple[str, str]:
    template = match_template(answers, templates)
    if template is not None:
        return template["code"], template["comment"]

    now = now or datetime.now()
    return build_code(answers, now), build_comment(answers, contacts, now)
