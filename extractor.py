# extractor.py
import logging
import re
from typing import List
from models import Contact

logger = logging.getLogger(__name__)

EMAIL_PATTERN = r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}"
EMAIL_REGEX = re.compile(EMAIL_PATTERN)

# Tab ou dois ou mais espaços separam as colunas da planilha
COLUMN_SEPARATOR = re.compile(r"\t|\s{2,}")
NAME_PUNCTUATION = re.compile(r"[,;:|<>(){}\[\]]")

# Layout da exportação: coluna 3 = nome, coluna 4 = email, coluna 8 = ignorar
MIN_COLUMNS = 8
NAME_COLUMN = 2
EMAIL_COLUMN = 3
IGNORE_COLUMN = 7

def is_valid_email(value: str) -> bool:
    return EMAIL_REGEX.fullmatch(value) is not None

def split_columns(line: str) -> List[str]:
    return [col.strip() for col in COLUMN_SEPARATOR.split(line) if col.strip()]

def _from_columns(columns: List[str]) -> Contact | None:
    if columns[IGNORE_COLUMN].lower() == "sim":
        return None

    name = columns[NAME_COLUMN]
    email = columns[EMAIL_COLUMN]
    if name and email and is_valid_email(email):
        return {"name": name, "email": email}
    return None

def _from_free_text(line: str) -> Contact | None:
    # Formato antigo: email em qualquer posição, nome é o resto da linha
    match = EMAIL_REGEX.search(line)
    if not match:
        return None

    email = match.group(0)
    name = line.replace(email, "", 1).strip()
    name = NAME_PUNCTUATION.sub("", name).strip()
    if len(name) < 2:
        name = email.split("@")[0]
    return {"name": name, "email": email}

def extract_contacts(raw_text: str) -> List[Contact]:
    contacts: List[Contact] = []
    lines = [line for line in raw_text.split("\n") if line.strip()]

    for line in lines:
        columns = split_columns(line)
        if len(columns) >= MIN_COLUMNS:
            contact = _from_columns(columns)
        else:
            contact = _from_free_text(line)

        if contact is not None:
            contacts.append(contact)

    logger.debug("%d contato(s) extraído(s) de %d linha(s)", len(contacts), len(lines))
    return contacts

def contact_emails(contacts: List[Contact]) -> str:
    return "; ".join(c["email"] for c in contacts)
