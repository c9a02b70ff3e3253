# clipboard.py
import html
import json
import streamlit.components.v1 as components

BUTTON_HEIGHT = 48

# Falha do navigator.clipboard só aparece como aviso temporário no botão
COPY_BUTTON_TEMPLATE = """
<button id="copy" {disabled} style="font: inherit; padding: 0.35rem 0.9rem; cursor: pointer;">📋 {label_html}</button>
<span id="status" style="margin-left: 0.5rem; font-family: sans-serif; font-size: 0.85rem;"></span>
<script>
  const text = {text_js};
  const button = document.getElementById('copy');
  const status = document.getElementById('status');
  const notify = (message) => {{
    status.textContent = message;
    setTimeout(() => (status.textContent = ''), 1200);
  }};
  button.addEventListener('click', async () => {{
    try {{
      await navigator.clipboard.writeText(text);
      notify({success_js});
    }} catch (e) {{
      notify({failure_js});
    }}
  }});
</script>
"""

def _js_string(value: str) -> str:
    # Evita fechar a tag <script> no meio do texto copiado
    return json.dumps(value, ensure_ascii=False).replace("</", "<\\/")

def copy_button_html(text: str, label: str) -> str:
    return COPY_BUTTON_TEMPLATE.format(
        disabled="disabled" if not text else "",
        label_html=html.escape(f"Copiar {label.lower()}"),
        text_js=_js_string(text),
        success_js=_js_string(f"{label} copiado!"),
        failure_js=_js_string(f"Erro ao copiar {label.lower()}"),
    )

def render_copy_button(text: str, label: str):
    components.html(copy_button_html(text, label), height=BUTTON_HEIGHT)
