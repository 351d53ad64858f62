from netparse.llm.base import InferenceClient
from netparse.llm.client import get_inference_client
from netparse.llm.ollama import OllamaClient
from netparse.llm.openai_compat import OpenAICompatibleClient

__all__ = ["InferenceClient", "OllamaClient", "OpenAICompatibleClient", "get_inference_client"]
