from netparse.settings import settings
from netparse.llm.base import InferenceClient
from netparse.llm.ollama import OllamaClient
from netparse.llm.openai_compat import OpenAICompatibleClient

def get_inference_client() -> InferenceClient:
    if settings.llm_provider == "openai":
        return OpenAICompatibleClient(
            api_key=settings.openai_api_key,
            base_url=settings.openai_base_url,
            timeout=settings.request_timeout,
        )

    return OllamaClient(
        settings.ollama_base_url,
        timeout=settings.request_timeout,
    )
