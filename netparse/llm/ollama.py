import httpx
from pydantic import ValidationError

from netparse.errors import InferenceError
from netparse.llm.base import InferenceClient
from netparse.schemas import ChatRequest, ChatResponse

class OllamaClient(InferenceClient):
    def __init__(self, base_url: str, * , timeout: float = 120.0,
    transport: httpx.AsyncBaseTransport | None = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    async def chat(self, request: ChatRequest) -> ChatResponse:
        # Native Ollama endpoint, honours "format" as a JSON Schema
        # POST {base_url}/api/chat
        url = f"{self.base_url}/api/chat"
        payload = request.model_dump(mode="json")

        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            r = await client.post(url, json=payload)
            r.raise_for_status()
            data = r.json()

        try:
            return ChatResponse.model_validate(data)
        except ValidationError as e:
            raise InferenceError(f"Ollama reply has no chat message: {e}") from e
