# models.py
from enum import Enum
from typing import Any, Dict, List

from pydantic import BaseModel, Field


class Role(str, Enum):
    USER = "user"
    MODEL = "model"


class Turn(BaseModel):
    role: Role = Field(..., description="'user' or 'model'")
    text: str

    def is_sendable(self) -> bool:
        return bool(self.text.strip())

    def to_payload(self) -> Dict[str, str]:
        return {"role": self.role.value, "text": self.text}

    def to_content(self) -> Dict[str, Any]:
        # Shape expected by the generation API for one conversation turn
        return {"role": self.role.value, "parts": [{"text": self.text}]}


class ChatRequest(BaseModel):
    conversation: List[Turn] = Field(..., description="Ordered conversation history")


class ChatResponse(BaseModel):
    result: str
    html: str = ""


class ErrorResponse(BaseModel):
    error: str


class HealthStatus(BaseModel):
    ok: bool
    model: str
