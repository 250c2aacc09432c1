"""Tests for the results and error panels."""

from model_compare.core.render import display_error, display_results, render_metrics
from model_compare.models import ComparisonOutcome, ModelResponse, ModelResult, ResultsPanel


def make_outcome(content1="a b", content2="a c"):
    return ComparisonOutcome(
        first=ModelResult(model="gpt-4o-mini", response=ModelResponse(
            content=content1, response_time_ms=120, prompt_tokens=3, completion_tokens=2, total_tokens=5)),
        second=ModelResult(model="claude-haiku", response=ModelResponse(
            content=content2, response_time_ms=80, prompt_tokens=4, completion_tokens=6, total_tokens=10)),
    )


class TestRenderMetrics:
    def test_lists_all_metrics(self):
        markup = render_metrics("gpt-4o-mini", make_outcome().first.response)
        assert '<span class="metric-value">gpt-4o-mini</span>' in markup
        assert '<span class="metric-value">120ms</span>' in markup
        assert "Prompt Tokens:" in markup
        assert "Completion Tokens:" in markup
        assert '<span class="metric-label">Total Tokens:</span><span class="metric-value">5</span>' in markup

    def test_model_name_is_escaped(self):
        markup = render_metrics("<img src=x>", ModelResponse())
        assert "<img" not in markup
        assert "&lt;img src=x&gt;" in markup


class TestDisplayResults:
    def test_highlighted(self):
        panel = ResultsPanel()
        display_results(panel, make_outcome(), highlight=True)

        assert panel.visible
        assert panel.response1 == 'a <span class="diff-removed">b</span>'
        assert panel.response2 == 'a <span class="diff-added">c</span>'
        assert panel.is_markup("response1")
        assert "claude-haiku" in panel.metrics2

    def test_plain_text(self):
        panel = ResultsPanel()
        display_results(panel, make_outcome(content1="<b>raw</b>"), highlight=False)

        assert panel.response1 == "<b>raw</b>"
        assert panel.response2 == "a c"
        assert not panel.is_markup("response1")
        assert not panel.is_markup("response2")
        assert panel.is_markup("metrics1")


class TestDisplayError:
    def test_clears_other_slots(self):
        panel = ResultsPanel(metrics1="some content", metrics2="some content", response2="some content")

        display_error(panel, "Test error")

        assert panel.metrics1 == ""
        assert panel.metrics2 == ""
        assert panel.response2 == ""

    def test_shows_message_in_first_response(self):
        panel = ResultsPanel()

        display_error(panel, "Test error message")

        assert "Test error message" in panel.response1
        assert "Error:" in panel.response1
        assert 'class="error"' in panel.response1
        assert panel.is_markup("response1")
        assert panel.visible

    def test_message_is_inserted_unescaped(self):
        panel = ResultsPanel()

        display_error(panel, '<script>alert("xss")</script>')

        assert '<script>alert("xss")</script>' in panel.response1
