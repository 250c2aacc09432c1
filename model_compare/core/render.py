# model_compare/core/render.py
from model_compare.core.escape import escape_html
from model_compare.core.highlight import highlight_differences
from model_compare.models import ComparisonOutcome, ModelResponse, ResultsPanel

METRIC_ITEM = (
    '<div class="metric-item">'
    '<span class="metric-label">{label}:</span>'
    '<span class="metric-value">{value}</span>'
    '</div>'
)


def render_metrics(model_name: str, response: ModelResponse) -> str:
    rows = [
        ("Model", escape_html(model_name)),
        ("Response Time", f"{response.response_time_ms}ms"),
        ("Prompt Tokens", response.prompt_tokens),
        ("Completion Tokens", response.completion_tokens),
        ("Total Tokens", response.total_tokens),
    ]
    return "\n".join(METRIC_ITEM.format(label=label, value=value) for label, value in rows)


def display_results(panel: ResultsPanel, outcome: ComparisonOutcome, highlight: bool) -> None:
    panel.set_markup("metrics1", render_metrics(outcome.first.model, outcome.first.response))
    panel.set_markup("metrics2", render_metrics(outcome.second.model, outcome.second.response))

    if highlight:
        highlighted1, highlighted2 = highlight_differences(
            outcome.first.response.content, outcome.second.response.content)
        panel.set_markup("response1", highlighted1)
        panel.set_markup("response2", highlighted2)
    else:
        panel.set_text("response1", outcome.first.response.content)
        panel.set_text("response2", outcome.second.response.content)

    panel.show()


def display_error(panel: ResultsPanel, message: str) -> None:
    """
    Shows `message` in the first response slot and clears the others.
    The message is inserted as markup; escape it first if it may hold untrusted text.
    """
    panel.clear("metrics1")
    panel.clear("metrics2")
    panel.clear("response2")
    panel.set_markup("response1", f'<div class="error"><strong>Error:</strong> {message}</div>')
    panel.show()
