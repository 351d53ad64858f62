"""
netparse: turn raw network device output into validated records with a local LLM.
"""
from netparse.errors import InferenceError
from netparse.extractor import (
    DecodeFailure,
    Extracted,
    ValidationFailure,
    build_prompt,
    build_request,
    extract,
    extract_outcome,
    interpret_response,
)
from netparse.llm import InferenceClient, OllamaClient, OpenAICompatibleClient, get_inference_client
from netparse.render import render, render_text
from netparse.validate import validate

__all__ = [
    "DecodeFailure",
    "Extracted",
    "InferenceClient",
    "InferenceError",
    "OllamaClient",
    "OpenAICompatibleClient",
    "ValidationFailure",
    "build_prompt",
    "build_request",
    "extract",
    "extract_outcome",
    "get_inference_client",
    "interpret_response",
    "render",
    "render_text",
    "validate",
]
