"""
Motor de matching entre client briefs y propiedades.

Implementa:
- Ranking: todas las propiedades contra un brief con el scoring ponderado
- Alta de propiedad: qué briefs coinciden según el matcher booleano

Los documentos inválidos dentro de un lote se loguean y se omiten;
el resto del lote se procesa igual.
"""

from dataclasses import dataclass
from typing import Any, Iterable, Optional

import structlog

from propmatch.config import Settings, get_settings
from propmatch.matching.brief_matcher import brief_matches
from propmatch.matching.inputs import MatchInputError, coerce_brief, coerce_property
from propmatch.matching.scorer import score_property
from propmatch.models import BriefMatch, ClientBrief, RankedMatch

logger = structlog.get_logger()


@dataclass
class MatchedBrief:
    """Brief que coincide con una propiedad recién creada."""

    brief: ClientBrief
    result: BriefMatch


class MatchingEngine:
    """
    Orquesta el scoring sobre lotes de documentos.

    Flujo de ranking:
    1. Validar el brief (si no es un documento, error del caller)
    2. Para cada propiedad: validar, puntuar
    3. Ordenar por score, filtrar por umbral y limitar
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()

    def rank_properties(
        self,
        brief: Any,
        properties: Iterable[Any],
        min_score: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> list[RankedMatch]:
        """
        Rankea propiedades para un brief.

        Args:
            brief: ClientBrief o dict
            properties: Propiedades (modelos o dicts)
            min_score: Score mínimo (default: settings.rank_min_score)
            limit: Máximo de resultados (default: settings.rank_limit)

        Returns:
            Lista de RankedMatch ordenada por score descendente
        """
        brief = coerce_brief(brief)

        ranked = []
        skipped = 0
        for document in properties:
            try:
                listing = coerce_property(document)
            except MatchInputError as e:
                logger.warning("Propiedad inválida, se omite", error=str(e))
                skipped += 1
                continue

            ranked.append(
                RankedMatch(
                    property_id=listing.id,
                    listing=listing,
                    result=score_property(listing, brief),
                )
            )

        # sort estable: a igual score se respeta el orden de entrada
        ranked.sort(key=lambda m: m.result.score, reverse=True)

        threshold = self.settings.rank_min_score if min_score is None else min_score
        above = [m for m in ranked if m.result.score >= threshold]

        limit = self.settings.rank_limit if limit is None else limit

        logger.info(
            "Ranking calculado",
            brief_id=brief.id,
            total=len(ranked),
            above_threshold=len(above),
            skipped=skipped,
        )

        return above[:limit]

    def briefs_matching_property(
        self,
        listing: Any,
        briefs: Iterable[Any],
    ) -> list[MatchedBrief]:
        """
        Briefs con los que coincide una propiedad (matcher booleano).

        Se usa al crear una propiedad para loguear/notificar coincidencias.
        """
        listing = coerce_property(listing)

        matched = []
        for document in briefs:
            try:
                brief = coerce_brief(document)
            except MatchInputError as e:
                logger.warning("Brief inválido, se omite", error=str(e))
                continue

            result = brief_matches(listing, brief)
            if result.is_match:
                matched.append(MatchedBrief(brief=brief, result=result))

        if matched:
            logger.info(
                "La propiedad coincide con client briefs",
                property_id=listing.id,
                briefs=len(matched),
            )
            for match in matched:
                logger.info(
                    "Brief coincidente",
                    client_name=match.brief.client_name,
                    match_score=match.result.match_score,
                )

        return matched
