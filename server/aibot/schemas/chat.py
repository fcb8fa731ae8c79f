from __future__ import annotations
from typing import Literal, Optional, Union
from pydantic import BaseModel, ConfigDict


class Token(BaseModel):
    """One increment of generated text; ``finished`` marks the last one."""

    model_config = ConfigDict(frozen=True)

    content: str = ""
    finished: bool = False


class ModelSelection(BaseModel):
    model_config = ConfigDict(frozen=True)

    requested_model: str
    resolved_model: str
    provider: str = "groq"

    def to_public(self) -> dict:
        return {
            "requestedModel": self.requested_model,
            "groqModel": self.resolved_model,
            "provider": self.provider,
        }


class TokenMessage(BaseModel):
    type: Literal["token"] = "token"
    content: str
    finished: bool = False


class DoneMessage(BaseModel):
    type: Literal["done"] = "done"


class ErrorMessage(BaseModel):
    type: Literal["error"] = "error"
    message: str


WireMessage = Union[TokenMessage, DoneMessage, ErrorMessage]


class ChatRequest(BaseModel):
    # Both fields are optional here so a missing message is reported
    # through the JSON error envelope rather than FastAPI's 422.
    message: Optional[str] = None
    model: Optional[str] = None
