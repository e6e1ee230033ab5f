"""
Modelo de Propiedad

Subconjunto de campos de un listing del CRM que usan el scoring,
el matcher booleano y el cálculo de costos de tenencia.

Los campos económicos se guardan como texto libre ("$520,000",
"Over $500,000", "$480/w", "5.2%") y se normalizan recién al evaluar.
"""

from typing import Optional, Union

from pydantic import Field, field_validator

from propmatch.models.fields import (
    CamelModel,
    free_text_or_number,
    lenient_count,
    lenient_number,
    lenient_text,
    truthy_flag,
)

FreeText = Optional[Union[float, str]]


class ListingMetrics(CamelModel):
    """
    Campos numéricos derivados del texto libre al crear la propiedad.

    Se guardan junto al listing para poder filtrar por rango sin
    volver a parsear.
    """

    asking_price_min: Optional[float] = None
    asking_price_max: Optional[float] = None
    rent_per_week: Optional[float] = None
    rental_yield_percent: Optional[float] = None
    land_size_numeric: Optional[float] = None
    year_built_numeric: Optional[float] = None


class Property(CamelModel):
    """Propiedad tal como la persiste el CRM."""

    id: Optional[str] = Field(None, description="ID del documento")
    address: Optional[str] = Field(None, description="Dirección completa")

    # Económicos (texto libre)
    asking_price: FreeText = Field(None, description="Precio pedido")
    rental: FreeText = Field(None, description="Alquiler semanal, ej: '$480/w'")
    rental_yield: FreeText = Field(None, description="Rendimiento bruto, ej: '5.2%'")
    insurance: FreeText = Field(None, description="Seguro anual")
    council_rate: FreeText = Field(None, description="Tasas municipales anuales")
    land_tax: FreeText = Field(None, description="Impuesto inmobiliario anual")

    # Características físicas
    bedrooms: Optional[int] = Field(None, description="Dormitorios")
    bathrooms: Optional[int] = Field(None, description="Baños")
    year_built: FreeText = Field(None, description="Año de construcción")
    land_size: FreeText = Field(None, description="Superficie del terreno")
    property_type: Optional[str] = Field(None, description="House, Unit, Townhouse...")

    # Flags
    subdivision_potential: bool = Field(default=False)
    is_offmarket: bool = Field(default=False)

    # Derivados (ver ListingMetrics)
    asking_price_min: Optional[float] = None
    asking_price_max: Optional[float] = None
    rent_per_week: Optional[float] = None
    rental_yield_percent: Optional[float] = None
    land_size_numeric: Optional[float] = None
    year_built_numeric: Optional[float] = None

    @field_validator(
        "asking_price",
        "rental",
        "rental_yield",
        "insurance",
        "council_rate",
        "land_tax",
        "year_built",
        "land_size",
        mode="before",
    )
    @classmethod
    def _free_text(cls, value):
        return free_text_or_number(value)

    @field_validator("bedrooms", "bathrooms", mode="before")
    @classmethod
    def _count(cls, value):
        return lenient_count(value)

    @field_validator(
        "asking_price_min",
        "asking_price_max",
        "rent_per_week",
        "rental_yield_percent",
        "land_size_numeric",
        "year_built_numeric",
        mode="before",
    )
    @classmethod
    def _number(cls, value):
        return lenient_number(value)

    @field_validator("subdivision_potential", "is_offmarket", mode="before")
    @classmethod
    def _flag(cls, value):
        return truthy_flag(value)

    @field_validator("address", "property_type", mode="before")
    @classmethod
    def _text(cls, value):
        return value if isinstance(value, str) else None

    @field_validator("id", mode="before")
    @classmethod
    def _id(cls, value):
        return lenient_text(value)

    def with_metrics(self, metrics: ListingMetrics) -> "Property":
        """Devuelve una copia con los campos numéricos derivados."""
        return self.model_copy(update=metrics.model_dump())
