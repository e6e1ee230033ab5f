"""
Base común de los modelos y coerciones tolerantes.

Los documentos llegan en camelCase (tal como los guarda el CRM) y pueden
traer valores sucios. Los modelos aceptan ambos nombres y, para los campos
numéricos simples, convierten a None lo que no se puede leer en vez de
rechazar el documento entero.
"""

import math
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """BaseModel con alias camelCase y campos extra ignorados."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        extra="ignore",
    )

    def to_json_dict(self) -> dict:
        """Serializa con los nombres camelCase del documento original."""
        return self.model_dump(mode="json", by_alias=True)


def lenient_number(value: Any) -> Optional[float]:
    """Número o None. Strings solo si son numéricos completos."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float, str)):
        try:
            number = float(value.strip() if isinstance(value, str) else value)
        except (ValueError, OverflowError):
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def lenient_count(value: Any) -> Optional[int]:
    """Entero >= 0 o None (dormitorios, baños)."""
    number = lenient_number(value)
    if number is None or number < 0:
        return None
    return int(number)


def lenient_text(value: Any) -> Optional[str]:
    """Texto o None. Los números (ids numéricos) se pasan a string."""
    if isinstance(value, str):
        return value
    number = lenient_number(value)
    if number is None:
        return None
    return str(int(number)) if number.is_integer() else str(number)


def truthy_flag(value: Any) -> bool:
    """Flag por veracidad: None, 0 o "" son False."""
    return bool(value)


def optional_flag(value: Any) -> Optional[bool]:
    """Solo True/False cuentan; cualquier otra cosa es indiferente (None)."""
    return value if isinstance(value, bool) else None


def none_as_empty(value: Any) -> Any:
    if value is None:
        return []
    return value


def free_text_or_number(value: Any) -> Any:
    """Deja pasar texto libre o números; cualquier otra cosa es None."""
    if isinstance(value, str):
        return value
    return lenient_number(value)
