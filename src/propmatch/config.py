"""
Configuración centralizada del sistema.
Carga variables de entorno y define settings globales.

Los parámetros financieros del scoring (tasa por defecto, LVR, etc.)
son constantes del dominio y no se leen del entorno.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Encontrar la raíz del proyecto (donde está el .env)
# config.py -> propmatch/ -> src/ -> project root
_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Configuración principal de la aplicación."""

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        env_prefix="PROPMATCH_",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = Field("INFO", description="Nivel de logging")

    # Ranking de propiedades
    rank_min_score: int = Field(
        0, ge=0, le=100, description="Score mínimo para incluir una propiedad en el ranking"
    )
    rank_limit: int = Field(
        50, ge=1, description="Máximo de propiedades devueltas por ranking"
    )


@lru_cache
def get_settings() -> Settings:
    """Obtiene la configuración cacheada."""
    return Settings()


# Constantes del sistema

# Financiación por defecto cuando el brief no las define
DEFAULT_INTEREST_RATE = 6.0  # % anual
DEFAULT_LVR = 80.0  # % del precio financiado

# Costos de tenencia
WEEKS_PER_MONTH = 4.33
PROPERTY_MANAGEMENT_RATE = 0.07

# Cortes de tier (score mínimo -> etiqueta)
MATCH_TIERS = [
    (90, "Perfect Match"),
    (75, "Good Match"),
    (50, "Moderate Match"),
]
LOW_MATCH_TIER = "Low Match"

# Umbral del matcher booleano (matchScore estrictamente mayor)
BRIEF_MATCH_THRESHOLD = 50

# Defaults del cálculo de cash flow (valores anuales salvo indicación)
CASHFLOW_DEFAULT_LVR = 80
CASHFLOW_DEFAULT_COUNCIL_RATE = 2500
CASHFLOW_DEFAULT_MAINTENANCE = 1500
CASHFLOW_DEFAULT_INSURANCE = 2000
CASHFLOW_DEFAULT_MANAGEMENT_FEE = 8  # % del alquiler anual
CASHFLOW_DEFAULT_LOAN_TERM = 30  # años
WEEKS_PER_YEAR = 52
