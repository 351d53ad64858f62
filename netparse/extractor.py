# netparse/extractor.py
"""
Schema-guided extraction of structured records from device output.

Pipeline:
- render the shape to JSON Schema
- one chat call, schema in the prompt and as the "format" hint, temperature 0
- json.loads the reply, validate against the shape

Only transport errors escape. Bad JSON and shape mismatches come back as
None from extract(); extract_outcome() keeps the tagged failure for debugging.
"""
import json
import logging
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar, Union

from pydantic import ValidationError

from netparse.llm.base import InferenceClient
from netparse.llm.client import get_inference_client
from netparse.render import render, render_text
from netparse.schemas import ChatMessage, ChatOptions, ChatRequest
from netparse.validate import validate

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Extracted(Generic[T]):
    value: T


@dataclass(frozen=True)
class DecodeFailure:
    detail: str
    content: str


@dataclass(frozen=True)
class ValidationFailure:
    detail: str
    content: str


Outcome = Union[Extracted, DecodeFailure, ValidationFailure]


def build_prompt(shape: Any, raw_text: str) -> str:
    return f"""Parse the following SSH output into a JSON object that matches this schema:
Schema:
{render_text(shape)}

SSH Output:
{raw_text}"""


def build_request(shape: Any, model: str, raw_text: str) -> ChatRequest:
    return ChatRequest(
        model=model,
        messages=[ChatMessage(role="user", content=build_prompt(shape, raw_text))],
        format=render(shape),
        options=ChatOptions(temperature=0.0),
    )


def interpret_response(shape: Any, content: str) -> Outcome:
    try:
        decoded = json.loads(content)
    except json.JSONDecodeError as e:
        return DecodeFailure(detail=str(e), content=content)

    try:
        return Extracted(validate(shape, decoded))
    except ValidationError as e:
        return ValidationFailure(detail=str(e), content=content)


async def extract_outcome(shape: Any, model: str, raw_text: str, * ,
    client: InferenceClient | None = None) -> Outcome:
    client = client or get_inference_client()
    request = build_request(shape, model, raw_text)

    logger.debug("Calling model %s (%d chars of input)", model, len(raw_text))
    response = await client.chat(request)

    return interpret_response(shape, response.message.content)


async def extract(shape: type[T], model: str, raw_text: str, * ,
    client: InferenceClient | None = None) -> Optional[T]:
    """
    Parse raw device output into a value of `shape`, or None when the model's
    output is not valid JSON or does not match the shape.
    """
    outcome = await extract_outcome(shape, model, raw_text, client=client)

    if isinstance(outcome, Extracted):
        return outcome.value

    kind = "invalid JSON" if isinstance(outcome, DecodeFailure) else "schema mismatch"
    logger.error("Generated invalid response (%s): %s", kind, outcome.detail)
    return None
