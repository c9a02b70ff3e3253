"""Tests for the copy-to-clipboard snippet."""
from clipboard import copy_button_html


def test_text_is_embedded_as_js_string():
    snippet = copy_button_html('linha 1\n"aspas"', "Código")
    assert '"linha 1\\n\\"aspas\\""' in snippet
    assert '"Código copiado!"' in snippet
    assert '"Erro ao copiar código"' in snippet


def test_script_tag_cannot_be_closed_by_text():
    snippet = copy_button_html("</script><b>x</b>", "Comentário")
    assert "</script><b>" not in snippet
    assert snippet.count("</script>") == 1


def test_disabled_when_empty():
    assert "disabled" in copy_button_html("", "Emails")
    assert "disabled" not in copy_button_html("a@b.com", "Emails")
