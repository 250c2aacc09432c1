from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Dict
from enum import Enum


class ResponseShape(str, Enum):
    CHOICE = "choice"  # {"choices": [{"message": {"content": ...}}]}
    BLOCK = "block"  # {"content": [{"text": ...}]}


class ModelResponse(BaseModel):
    # Normalized reply of one model plus timing and token usage.
    model_config = ConfigDict(frozen=True)

    content: str = ""
    response_time_ms: int = Field(0, ge=0)
    prompt_tokens: int = Field(0, ge=0)
    completion_tokens: int = Field(0, ge=0)
    total_tokens: int = Field(0, ge=0)


class ModelInput(BaseModel):
    endpoint: str = Field("",
                          examples=["https://api.openai.com/v1/chat/completions"],
                          description="URL the prompt is posted to")
    api_key: str = Field("", description="Sent as a bearer token")
    model: str = Field("", examples=["gpt-4o-mini"], description="Model identifier")


class CompareRequest(BaseModel):
    model1: ModelInput
    model2: ModelInput
    prompt: str = Field("", description="Prompt shared by both models")
    highlight: bool = Field(True, description="Highlight word-level differences")
    max_tokens: Optional[int] = Field(None, gt=0,
                                      description="Overrides the configured maximum output length")
    temperature: Optional[float] = Field(None, ge=0,
                                         description="Overrides the configured sampling temperature")


class ModelResult(BaseModel):
    model: str
    response: ModelResponse


class ComparisonOutcome(BaseModel):
    first: ModelResult
    second: ModelResult


class ResultsPanel(BaseModel):
    """
    Presentation sink with four slots and a visibility flag.
    A slot listed in `markup_slots` holds markup, any other slot holds plain text.
    """
    metrics1: str = ""
    metrics2: str = ""
    response1: str = ""
    response2: str = ""
    markup_slots: Dict[str, bool] = Field(default_factory=dict)
    visible: bool = False

    def set_markup(self, slot: str, markup: str) -> None:
        setattr(self, slot, markup)
        self.markup_slots[slot] = True

    def set_text(self, slot: str, text: str) -> None:
        setattr(self, slot, text)
        self.markup_slots[slot] = False

    def clear(self, slot: str) -> None:
        setattr(self, slot, "")
        self.markup_slots.pop(slot, None)

    def is_markup(self, slot: str) -> bool:
        return self.markup_slots.get(slot, False)

    def show(self) -> None:
        self.visible = True

    def hide(self) -> None:
        self.visible = False


class CompareResponse(BaseModel):
    status: str = Field(..., description="Comparison status")
    first: ModelResult = Field(..., description="Result for the first model")
    second: ModelResult = Field(..., description="Result for the second model")
    panel: ResultsPanel = Field(..., description="Rendered metrics and response slots")


class HighlightRequest(BaseModel):
    text1: Optional[str] = Field(None, examples=["The quick brown fox"])
    text2: Optional[str] = Field(None, examples=["The quick red fox"])


class HighlightResult(BaseModel):
    markup1: str
    markup2: str
