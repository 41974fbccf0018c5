# core/config_schema.py

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional

from core import messages as msg


class InputOptions(BaseModel):
    """
    Per-call configuration for a single prompt/read cycle.

    show_prompt=None means "show it when there is a prompt to show".
    An empty prompt is never displayed, whatever show_prompt says.
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    prompt: str = ""
    default: Optional[str] = None
    trim: bool = True
    show_prompt: Optional[bool] = None

    @property
    def effective_show_prompt(self) -> bool:
        if self.show_prompt is None:
            return self.prompt != ""
        return self.show_prompt


class DemoPrompts(BaseModel):
    name: str = msg.PROMPT_NAME
    port: str = msg.PROMPT_PORT
    text_preserved: str = msg.PROMPT_TEXT_PRESERVED
    text_trimmed: str = msg.PROMPT_TEXT_TRIMMED
    empty: str = msg.PROMPT_EMPTY


class DemoMessages(BaseModel):
    no_name_entered: str = msg.NO_NAME_ENTERED
    demo_completed: str = msg.DEMO_COMPLETED


class DemoConfig(BaseModel):
    title: str = msg.DEMO_TITLE
    default_port: str = Field(msg.DEMO_DEFAULT_PORT, pattern=r"^\d{1,5}$")
    prompts: DemoPrompts = DemoPrompts()
    messages: DemoMessages = DemoMessages()
    event_log: bool = True

    @field_validator("title")
    def title_not_empty(cls, v):
        if not v.strip():
            raise ValueError("demo title must not be empty")
        return v
