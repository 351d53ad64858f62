## Base inference client interface
from abc import ABC, abstractmethod

from netparse.schemas import ChatRequest, ChatResponse

class InferenceClient(ABC):
    @abstractmethod
    async def chat(self, request: ChatRequest) -> ChatResponse:
        """
        One blocking round trip to the inference service.
        Transport errors are raised to the caller, never swallowed.
        """
        raise NotImplementedError
