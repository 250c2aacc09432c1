"""Tests for response shape detection and normalization."""

import pytest

from model_compare.core.errors import FormatError
from model_compare.core.normalizer import detect_shape, normalize
from model_compare.models import ModelResponse, ResponseShape
from payloads import block_style_body, choice_style_body


# ---------------------------------------------------------------------------
# Shape detection
# ---------------------------------------------------------------------------


class TestDetectShape:
    def test_choice_style(self):
        assert detect_shape(choice_style_body()) == ResponseShape.CHOICE

    def test_block_style(self):
        assert detect_shape(block_style_body()) == ResponseShape.BLOCK

    @pytest.mark.parametrize(
        "raw",
        [
            {},
            [],
            None,
            "text",
            {"choices": []},
            {"choices": [{}]},
            {"choices": [{"message": "hi"}]},
            {"content": []},
            {"content": [{"text": ""}]},
            {"content": "hi"},
        ],
    )
    def test_unknown_shapes(self, raw):
        assert detect_shape(raw) is None

    def test_choice_style_wins_when_both_present(self):
        raw = {**block_style_body(text="block"), **choice_style_body(content="choice")}
        assert detect_shape(raw) == ResponseShape.CHOICE


# ---------------------------------------------------------------------------
# Normalization
# ---------------------------------------------------------------------------


class TestNormalizeChoiceStyle:
    def test_reads_content_and_usage(self):
        result = normalize(choice_style_body())
        assert result == ModelResponse(
            content="hi", prompt_tokens=3, completion_tokens=2, total_tokens=5)

    def test_total_is_taken_verbatim(self):
        result = normalize(choice_style_body(prompt_tokens=3, completion_tokens=2, total_tokens=9))
        assert result.total_tokens == 9

    def test_missing_usage_defaults_to_zero(self):
        result = normalize({"choices": [{"message": {"content": "hello"}}]})
        assert result.content == "hello"
        assert result.prompt_tokens == 0
        assert result.completion_tokens == 0
        assert result.total_tokens == 0

    def test_missing_usage_fields_default_to_zero(self):
        result = normalize({"choices": [{"message": {"content": "x"}}], "usage": {"prompt_tokens": 4}})
        assert result.prompt_tokens == 4
        assert result.completion_tokens == 0
        assert result.total_tokens == 0

    def test_null_content_becomes_empty(self):
        result = normalize({"choices": [{"message": {"content": None}}]})
        assert result.content == ""

    def test_response_time_is_left_for_the_caller(self):
        assert normalize(choice_style_body()).response_time_ms == 0


class TestNormalizeBlockStyle:
    def test_total_is_derived(self):
        result = normalize(block_style_body())
        assert result == ModelResponse(
            content="hi", prompt_tokens=3, completion_tokens=2, total_tokens=5)

    def test_missing_usage_defaults_to_zero(self):
        result = normalize({"content": [{"text": "hello"}]})
        assert result.total_tokens == 0

    def test_partial_usage(self):
        result = normalize({"content": [{"text": "hello"}], "usage": {"output_tokens": 7}})
        assert result.prompt_tokens == 0
        assert result.completion_tokens == 7
        assert result.total_tokens == 7

    def test_integral_float_counts_are_kept(self):
        result = normalize({"content": [{"text": "x"}], "usage": {"input_tokens": 3.0, "output_tokens": 2.0}})
        assert result.prompt_tokens == 3
        assert result.completion_tokens == 2
        assert result.total_tokens == 5

    def test_fractional_counts_read_as_zero(self):
        result = normalize(choice_style_body(prompt_tokens=2.5, completion_tokens=True, total_tokens=5.0))
        assert result.prompt_tokens == 0
        assert result.completion_tokens == 0
        assert result.total_tokens == 5

    def test_invalid_counts_read_as_zero(self):
        result = normalize({"content": [{"text": "x"}], "usage": {"input_tokens": "3", "output_tokens": -2}})
        assert result.prompt_tokens == 0
        assert result.completion_tokens == 0


class TestNormalizeFailures:
    @pytest.mark.parametrize("raw", [{}, [], None, {"choices": []}, {"content": [{"text": ""}]}])
    def test_unknown_shape_raises(self, raw):
        with pytest.raises(FormatError, match="Unexpected response format"):
            normalize(raw)

    def test_result_is_immutable(self):
        result = normalize(choice_style_body())
        with pytest.raises(Exception):
            result.content = "changed"
