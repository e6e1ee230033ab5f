"""
Validación de los documentos de entrada del matching.
"""

from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from propmatch.models import ClientBrief, Property

ModelT = TypeVar("ModelT", bound=BaseModel)


class MatchInputError(ValueError):
    """El caller pasó algo que no es un documento (None, lista, etc.)."""


def _coerce(value: Any, model: type[ModelT], name: str) -> ModelT:
    if value is None:
        raise MatchInputError(f"{name} es None")
    if isinstance(value, model):
        return value
    if isinstance(value, Mapping):
        try:
            return model.model_validate(dict(value))
        except ValidationError as e:
            raise MatchInputError(f"{name} inválido: {e}") from e
    raise MatchInputError(
        f"{name} debe ser {model.__name__} o un dict, no {type(value).__name__}"
    )


def coerce_property(value: Any) -> Property:
    return _coerce(value, Property, "property")


def coerce_brief(value: Any) -> ClientBrief:
    return _coerce(value, ClientBrief, "client brief")
