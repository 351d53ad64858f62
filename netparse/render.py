## Shape -> JSON Schema rendering
import json
from typing import Any, Dict

from pydantic import TypeAdapter

def render(shape: Any) -> Dict[str, Any]:
    """
    JSON Schema document for a shape (model class, TypedDict, primitive,
    list[...], Optional[...]). Nested models land under "$defs".
    """
    return TypeAdapter(shape).json_schema()

def render_text(shape: Any) -> str:
    # Field order is kept as declared so the prompt reads like the model
    return json.dumps(render(shape), indent=2)
