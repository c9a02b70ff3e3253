# models.py
from datetime import datetime
from typing import List, Dict, TypedDict, Literal, Optional

AnswerSet = Dict[str, str]                                  # id da pergunta → resposta

FieldStatus = Literal["error", "warning", "success", "neutral"]

class Contact(TypedDict):
    name: str
    email: str

class Template(TypedDict):
    id: str
    name: str
    conditions: Dict[str, str]    # id da pergunta → resposta exigida
    code: str
    comment: str

class Question(TypedDict, total=False):
    id: str
    question: str
    options: List[str]
    section: str
    required: bool

class FormData(TypedDict):
    answers: AnswerSet
    raw_text: str                 # texto colado pelo operador
    contacts: List[Contact]

class ChecklistState(TypedDict, total=False):
    answers: AnswerSet
    raw_text: str
    templates: List[Template]
    now: datetime
    contacts: List[Contact]                              # extraídos de raw_text
    matched: Optional[Template]                          # None → síntese
    code: str
    comment: str
