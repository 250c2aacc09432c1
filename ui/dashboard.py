import streamlit as st
import requests
from typing import Dict, Optional

from model_compare.config import settings
from model_compare.core.escape import escape_html
from model_compare.core.render import display_error
from model_compare.models import ResultsPanel

API_BASE_URL = settings.API_BASE_URL

DIFF_STYLE = """
<style>
.metric-item { display: flex; justify-content: space-between; padding: 2px 6px; font-family: monospace; }
.metric-label { font-weight: bold; }
.response-box { background-color: #f6f8fa; padding: 8px; white-space: pre-wrap; word-wrap: break-word; }
.diff-removed { background-color: #ffeef0; text-decoration: line-through; }
.diff-added { background-color: #e6ffed; }
.error { background-color: #ffeef0; padding: 6px; }
</style>
"""


# --- HELPER FUNCTIONS FOR API CALLS ---
def request_comparison(payload: Dict) -> requests.Response:
    """Posts the comparison form to the API."""
    return requests.post(f"{API_BASE_URL}/api/v1/compare", json=payload)


def error_detail(response: requests.Response) -> str:
    try:
        detail = response.json().get("detail")
    except ValueError:
        detail = None
    return str(detail) if detail else f"HTTP {response.status_code}: {response.reason}"


# --- UI AND FORMATTING HELPER FUNCTIONS ---

def model_inputs(key_prefix: str, title: str) -> Dict[str, str]:
    st.subheader(title)
    endpoint = st.text_input("Endpoint URL", placeholder="https://api.openai.com/v1/chat/completions",
                             key=f"endpoint_{key_prefix}")
    api_key = st.text_input("API Key", type="password", key=f"apikey_{key_prefix}")
    model = st.text_input("Model", placeholder="gpt-4o-mini", key=f"model_{key_prefix}")
    return {"endpoint": endpoint, "api_key": api_key, "model": model}


def render_slot(panel: ResultsPanel, slot: str):
    content = getattr(panel, slot)
    if not content:
        return
    if panel.is_markup(slot):
        st.markdown(f"<div class='response-box'>{content}</div>", unsafe_allow_html=True)
    else:
        st.markdown(f"<div class='response-box'>{escape_html(content)}</div>", unsafe_allow_html=True)


def show_results_panel(panel: ResultsPanel, model1: str, model2: str):
    if not panel.visible:
        return
    st.markdown(DIFF_STYLE, unsafe_allow_html=True)
    col1, col2 = st.columns(2)
    with col1:
        st.subheader(model1 or "Model 1")
        render_slot(panel, "metrics1")
        render_slot(panel, "response1")
    with col2:
        st.subheader(model2 or "Model 2")
        render_slot(panel, "metrics2")
        render_slot(panel, "response2")


def run_comparison_from_form(payload: Dict) -> Optional[ResultsPanel]:
    with st.spinner("Comparing responses..."):
        try:
            response = request_comparison(payload)
        except requests.RequestException as e:
            panel = ResultsPanel()
            display_error(panel, escape_html(f"Error comparing responses: {e}"))
            return panel

    if response.status_code == 200:
        return ResultsPanel.model_validate(response.json()["panel"])

    panel = ResultsPanel()
    display_error(panel, escape_html(f"Error comparing responses: {error_detail(response)}"))
    return panel


# --- Main App ---
def show_dashboard():
    st.set_page_config(layout="wide", page_title="LLM Response Comparison")
    st.title("LLM Response Comparison")

    col1, col2 = st.columns(2)
    with col1:
        first = model_inputs("1", "Model 1")
    with col2:
        second = model_inputs("2", "Model 2")

    prompt = st.text_area("**Prompt**", height=150, key="prompt_text_area")
    highlight = st.toggle("Highlight differences", value=True, key="highlight_toggle")

    if st.button("**Compare Responses**", use_container_width=True):
        required = [first["endpoint"], second["endpoint"], first["api_key"], second["api_key"],
                    first["model"], second["model"], prompt]
        if not all(value.strip() for value in required):
            st.warning("Please fill in all fields")
        else:
            payload = {
                "model1": first,
                "model2": second,
                "prompt": prompt,
                "highlight": highlight,
            }
            st.session_state["panel"] = run_comparison_from_form(payload)
            st.session_state["models"] = (first["model"], second["model"])

    panel = st.session_state.get("panel")
    if panel:
        show_results_panel(panel, *st.session_state.get("models", ("", "")))


if __name__ == "__main__":
    show_dashboard()
