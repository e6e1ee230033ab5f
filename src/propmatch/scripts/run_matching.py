"""
Script para ejecutar el matching sobre documentos JSON.

Uso:
    python -m propmatch.scripts.run_matching rank --brief brief.json --properties properties.json
    python -m propmatch.scripts.run_matching rank --brief brief.json --properties properties.json --min-score 50 --limit 10
    python -m propmatch.scripts.run_matching briefs --property property.json --briefs briefs.json
    python -m propmatch.scripts.run_matching cashflow --inputs cashflow.json --interest-rate 6.2
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Optional

import structlog

from propmatch.finance import calculate_cash_flow
from propmatch.logging_setup import configure_logging
from propmatch.matching import MatchingEngine, MatchInputError

logger = structlog.get_logger()


def _load_json(path: str) -> Any:
    return json.loads(Path(path).read_text(encoding="utf-8"))


def _load_list(path: str) -> list:
    data = _load_json(path)
    if not isinstance(data, list):
        raise ValueError(f"{path} debe contener una lista JSON")
    return data


def _print_json(payload: Any) -> None:
    print(json.dumps(payload, ensure_ascii=False, indent=2))


def run_rank(args: argparse.Namespace) -> None:
    """Rankea propiedades contra un brief."""
    engine = MatchingEngine()
    ranked = engine.rank_properties(
        brief=_load_json(args.brief),
        properties=_load_list(args.properties),
        min_score=args.min_score,
        limit=args.limit,
    )
    _print_json([match.to_json_dict() for match in ranked])


def run_briefs(args: argparse.Namespace) -> None:
    """Lista los briefs que coinciden con una propiedad nueva."""
    engine = MatchingEngine()
    matched = engine.briefs_matching_property(
        listing=_load_json(args.property),
        briefs=_load_list(args.briefs),
    )
    _print_json(
        [
            {
                "briefId": match.brief.id,
                "clientName": match.brief.client_name,
                **match.result.to_json_dict(),
            }
            for match in matched
        ]
    )


def run_cashflow(args: argparse.Namespace) -> None:
    """Calcula el cash flow interest-only vs P&I."""
    report = calculate_cash_flow(_load_json(args.inputs), args.interest_rate)
    _print_json(report.to_json_dict())


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Matching de propiedades contra client briefs"
    )
    parser.add_argument("--log-level", default=None, help="Nivel de logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    rank = subparsers.add_parser("rank", help="Rankear propiedades para un brief")
    rank.add_argument("--brief", required=True, help="JSON con el client brief")
    rank.add_argument("--properties", required=True, help="JSON con lista de propiedades")
    rank.add_argument("--min-score", type=int, default=None, help="Score mínimo (0-100)")
    rank.add_argument("--limit", type=int, default=None, help="Máximo de resultados")
    rank.set_defaults(handler=run_rank)

    briefs = subparsers.add_parser("briefs", help="Briefs que coinciden con una propiedad")
    briefs.add_argument("--property", required=True, help="JSON con la propiedad")
    briefs.add_argument("--briefs", required=True, help="JSON con lista de briefs")
    briefs.set_defaults(handler=run_briefs)

    cashflow = subparsers.add_parser("cashflow", help="Cash flow de una inversión")
    cashflow.add_argument("--inputs", required=True, help="JSON con los inputs")
    cashflow.add_argument(
        "--interest-rate", type=float, default=None, help="Tasa anual del cliente en %%"
    )
    cashflow.set_defaults(handler=run_cashflow)

    return parser


def main(argv: Optional[list[str]] = None):
    """Entry point del script."""
    args = build_parser().parse_args(argv)
    configure_logging(level=args.log_level)

    try:
        args.handler(args)
        sys.exit(0)

    except KeyboardInterrupt:
        logger.info("Matching interrumpido por usuario")
        sys.exit(130)
    except (OSError, ValueError) as e:
        # MatchInputError y JSONDecodeError son ValueError
        logger.error(
            "Error fatal en matching",
            command=args.command,
            error=str(e),
            input_error=isinstance(e, MatchInputError),
        )
        sys.exit(1)


if __name__ == "__main__":
    main()
