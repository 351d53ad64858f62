from openai import AsyncOpenAI

from netparse.errors import InferenceError
from netparse.llm.base import InferenceClient
from netparse.schemas import ChatMessage, ChatRequest, ChatResponse

class OpenAICompatibleClient(InferenceClient):
    def __init__(self, * , api_key: str | None, base_url: str, timeout: float = 120.0):
        # OpenAI-compatible servers often ignore the key, the SDK still wants one
        self.api_key = api_key or "unused"
        self.base_url = base_url
        self.timeout = timeout

    async def chat(self, request: ChatRequest) -> ChatResponse:
        async with AsyncOpenAI(api_key=self.api_key, base_url=self.base_url,
            timeout=self.timeout) as client:
            resp = await client.chat.completions.create(
                model=request.model,
                temperature=request.options.temperature,
                messages=[m.model_dump() for m in request.messages],
                response_format={
                    "type": "json_schema",
                    "json_schema": {"name": "extraction", "schema": request.format},
                },
            )

        if not resp.choices or resp.choices[0].message.content is None:
            raise InferenceError("OpenAI-compatible reply has no message content")

        return ChatResponse(message=ChatMessage(role="assistant",
            content=resp.choices[0].message.content))
