from pydantic import BaseModel
from typing import Any, List, Union
import orjson

def to_json(payload :Union[BaseModel, List[BaseModel], Any]) -> str:
    """Serializes tool output (models, lists of models or plain data) as indented JSON."""
    if isinstance(payload, BaseModel):
        payload = payload.model_dump(mode="json")
    elif isinstance(payload, list):
        payload = [
            item.model_dump(mode="json") if isinstance(item, BaseModel) else item
            for item in payload
        ]
    return orjson.dumps(payload, option=orjson.OPT_INDENT_2).decode()
