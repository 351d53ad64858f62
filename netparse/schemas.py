## Pydantic schemas for the inference service wire format
from typing import Any, Dict, List

from pydantic import BaseModel, Field

class ChatMessage(BaseModel):
    role: str
    content: str

class ChatOptions(BaseModel):
    temperature: float = 0.0

class ChatRequest(BaseModel):
    model: str = Field(min_length=1)
    messages: List[ChatMessage]
    # JSON Schema the service should shape its output to
    format: Dict[str, Any]
    options: ChatOptions = Field(default_factory=ChatOptions)
    stream: bool = False

class ChatResponse(BaseModel):
    message: ChatMessage
