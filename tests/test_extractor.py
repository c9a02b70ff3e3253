"""Tests for contact extraction from pasted text."""
from extractor import contact_emails, extract_contacts, is_valid_email, split_columns


def _row(*columns, sep="\t"):
    return sep.join(columns)


class TestSpreadsheetRows:
    def test_row_with_eight_columns(self):
        line = _row("1", "ACME", "Maria Silva", "maria@acme.com.br", "SP", "x", "y", "Não")
        assert extract_contacts(line) == [{"name": "Maria Silva", "email": "maria@acme.com.br"}]

    def test_ignore_flag_skips_row(self):
        line = _row("1", "ACME", "Maria Silva", "maria@acme.com.br", "SP", "x", "y", "SIM")
        assert extract_contacts(line) == []

    def test_ignore_flag_is_case_insensitive(self):
        line = _row("1", "ACME", "Maria Silva", "maria@acme.com.br", "SP", "x", "y", "sIm")
        assert extract_contacts(line) == []

    def test_double_spaces_separate_columns(self):
        line = _row("1", "ACME", "Maria Silva", "maria@acme.com", "a", "b", "c", "nao", sep="  ")
        assert split_columns(line)[2] == "Maria Silva"
        assert extract_contacts(line) == [{"name": "Maria Silva", "email": "maria@acme.com"}]

    def test_invalid_email_column_yields_nothing(self):
        line = _row("1", "ACME", "Maria Silva", "maria@acme", "ok@valid.com", "x", "y", "Não")
        assert extract_contacts(line) == []

    def test_extra_columns_are_allowed(self):
        line = _row("1", "ACME", "Rui", "rui@acme.pt", "a", "b", "c", "Não", "extra")
        assert extract_contacts(line) == [{"name": "Rui", "email": "rui@acme.pt"}]


class TestFreeText:
    def test_name_and_email(self):
        assert extract_contacts("Jane Doe jane@example.com") == [
            {"name": "Jane Doe", "email": "jane@example.com"}
        ]

    def test_no_email(self):
        assert extract_contacts("notanemail") == []

    def test_separator_punctuation_removed(self):
        assert extract_contacts("Ana Souza; <ana@empresa.io>") == [
            {"name": "Ana Souza", "email": "ana@empresa.io"}
        ]

    def test_short_name_falls_back_to_local_part(self):
        assert extract_contacts("A a.b@c.co") == [{"name": "a.b", "email": "a.b@c.co"}]

    def test_email_only(self):
        assert extract_contacts("(joao@x.com)") == [{"name": "joao", "email": "joao@x.com"}]


class TestExtraction:
    def test_empty_text(self):
        assert extract_contacts("") == []
        assert extract_contacts("   \n\n  ") == []

    def test_order_and_duplicates_kept(self):
        text = "B b@x.com\n\nJane Doe jane@example.com\nB b@x.com\nlixo"
        contacts = extract_contacts(text)
        assert [c["email"] for c in contacts] == ["b@x.com", "jane@example.com", "b@x.com"]

    def test_every_email_is_valid(self):
        text = "\n".join([
            "x@y",
            "foo@bar.c",
            _row("1", "2", "Nome", "nome@", "5", "6", "7", "8"),
            "ok ok@fine.org",
        ])
        contacts = extract_contacts(text)
        assert contacts == [{"name": "ok", "email": "ok@fine.org"}]
        assert all(is_valid_email(c["email"]) for c in contacts)

    def test_contact_emails(self):
        contacts = [{"name": "A", "email": "a@x.com"}, {"name": "B", "email": "b@x.com"}]
        assert contact_emails(contacts) == "a@x.com; b@x.com"
        assert contact_emails([]) == ""
