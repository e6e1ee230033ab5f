"""
Modelo de Client Brief

Criterios de búsqueda que un buyer's agent carga para su cliente:
presupuesto, zonas, rendimiento mínimo, financiación y pesos por criterio.
"""

from typing import Optional

from pydantic import Field, field_validator

from propmatch.models.fields import (
    CamelModel,
    lenient_number,
    lenient_text,
    none_as_empty,
    optional_flag,
)


class NumericRange(CamelModel):
    """Rango numérico abierto (min y/o max)."""

    min: Optional[float] = None
    max: Optional[float] = None

    @field_validator("min", "max", mode="before")
    @classmethod
    def _number(cls, value):
        return lenient_number(value)


class ClientBrief(CamelModel):
    """
    Brief de un cliente.

    Todos los criterios son opcionales: un criterio ausente no participa
    del scoring (ni suma puntos ni suma al máximo posible).
    """

    id: Optional[str] = Field(None, description="ID del documento")
    client_name: Optional[str] = Field(None, description="Nombre del cliente")

    # Criterios del scoring ponderado
    budget: Optional[NumericRange] = Field(None, description="Presupuesto (se usa max)")
    preferred_locations: list[str] = Field(
        default_factory=list, description="Substrings de dirección aceptables"
    )
    bedrooms: Optional[float] = Field(None, description="Mínimo de dormitorios")
    bathrooms: Optional[float] = Field(None, description="Mínimo de baños")
    min_yield: Optional[float] = Field(None, description="Rendimiento mínimo %")
    min_build_year: Optional[float] = Field(None, description="Año de construcción mínimo")
    max_monthly_holding_cost: Optional[float] = Field(
        None, description="Costo de tenencia neto mensual máximo"
    )

    # Financiación
    interest_rate: Optional[float] = Field(None, description="Tasa anual % (default 6)")
    lvr: Optional[float] = Field(None, description="Loan-to-value % (default 80)")

    # Pesos por criterio (default 1; se descartan los no positivos)
    weightage: dict[str, float] = Field(default_factory=dict)

    # Criterios del matcher booleano
    rental_yield: Optional[NumericRange] = Field(None, description="Rendimiento (se usa min)")
    land_size: Optional[NumericRange] = Field(None, description="Superficie (se usa min)")
    property_type: Optional[str] = Field(None, description="Tipo exacto requerido")
    is_offmarket_preferred: Optional[bool] = Field(
        None, description="Preferencia off-market (None = indiferente)"
    )

    @field_validator(
        "bedrooms",
        "bathrooms",
        "min_yield",
        "min_build_year",
        "max_monthly_holding_cost",
        "interest_rate",
        "lvr",
        mode="before",
    )
    @classmethod
    def _number(cls, value):
        return lenient_number(value)

    @field_validator("id", "client_name", "property_type", mode="before")
    @classmethod
    def _text(cls, value):
        return lenient_text(value)

    @field_validator("is_offmarket_preferred", mode="before")
    @classmethod
    def _preference(cls, value):
        return optional_flag(value)

    @field_validator("budget", "rental_yield", "land_size", mode="before")
    @classmethod
    def _range(cls, value):
        if isinstance(value, (dict, NumericRange)):
            return value
        return None

    @field_validator("preferred_locations", mode="before")
    @classmethod
    def _locations(cls, value):
        value = none_as_empty(value)
        if isinstance(value, str):
            return [value]
        if isinstance(value, (list, tuple)):
            return [loc for loc in value if isinstance(loc, str) and loc.strip()]
        return []

    @field_validator("weightage", mode="before")
    @classmethod
    def _weights(cls, value):
        if not isinstance(value, dict):
            return {}
        weights = {}
        for key, raw in value.items():
            weight = lenient_number(raw)
            if weight is not None and weight > 0:
                weights[str(key)] = weight
        return weights
