# templates.py
import copy
from typing import Any, Dict, Iterable, List, Optional
from models import AnswerSet, Template

DEFAULT_TEMPLATES: List[Template] = [
    {
        "id": "1",
        "name": "Hotline Aprovado",
        "conditions": {"fase": "Hotline", "card_aprovado": "Sim", "temos_hotline": "Sim"},
        "code": "HTSPT1",
        "comment": "Enviar ciclo 1 de hotline",
    }
]

TEMPLATE_FIELDS = ("id", "name", "code", "comment")

def default_templates() -> List[Template]:
    return copy.deepcopy(DEFAULT_TEMPLATES)

def _is_template(entry: Any) -> bool:
    if not isinstance(entry, dict):
        return False
    if not all(isinstance(entry.get(field), str) for field in TEMPLATE_FIELDS):
        return False
    conditions = entry.get("conditions")
    return isinstance(conditions, dict) and all(
        isinstance(k, str) and isinstance(v, str) for k, v in conditions.items()
    )

def normalize_templates(raw: Any) -> Optional[List[Template]]:
    # Lista inválida → None (quem chama decide o padrão); entradas quebradas são descartadas
    if not isinstance(raw, list):
        return None
    return [
        {
            "id": entry["id"],
            "name": entry["name"],
            "conditions": dict(entry["conditions"]),
            "code": entry["code"],
            "comment": entry["comment"],
        }
        for entry in raw if _is_template(entry)
    ]

def next_template_id(templates: List[Template]) -> str:
    numeric = [int(t["id"]) for t in templates if t["id"].isdecimal()]
    return str(max(numeric, default=0) + 1)

def conditions_from_answers(answers: AnswerSet, question_ids: Iterable[str]) -> Dict[str, str]:
    return {qid: answers[qid] for qid in question_ids if answers.get(qid)}

def add_template(templates: List[Template], name: str, conditions: Dict[str, str],
                 code: str, comment: str) -> List[Template]:
    name, code = name.strip(), code.strip()
    if not name:
        raise ValueError("O template precisa de um nome")
    if not code:
        raise ValueError("O template precisa de um código")
    if not conditions:
        # Sem condições o template casaria com qualquer resposta
        raise ValueError("Selecione ao menos uma condição")

    template: Template = {
        "id": next_template_id(templates),
        "name": name,
        "conditions": dict(conditions),
        "code": code,
        "comment": comment,
    }
    return templates + [template]

def remove_template(templates: List[Template], template_id: str) -> List[Template]:
    return [t for t in templates if t["id"] != template_id]
