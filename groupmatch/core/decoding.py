from typing import Any, Dict, Iterable, List, Type, TypeVar

import pydantic
from pydantic import BaseModel

from groupmatch.core.errors import ValidationError

M = TypeVar("M", bound=BaseModel)


def decode(model: Type[M], document: Dict[str, Any]) -> M:
    """Validate a raw store document into a typed record"""
    try:
        return model.model_validate(document)
    except pydantic.ValidationError as e:
        raise ValidationError(
            f"Stored {model.__name__} document {document.get('id')!r} is malformed: "
            f"{e.error_count()} error(s)"
        ) from e


def decode_all(model: Type[M], documents: Iterable[Dict[str, Any]]) -> List[M]:
    return [decode(model, doc) for doc in documents]
