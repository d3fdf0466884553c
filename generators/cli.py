"""CLI entry point for the synthetic transaction generator.

Usage:
    python -m generators.cli transaction --count 1000
    python -m generators.cli transaction --config fraud_mix.yaml --count 500 --score
"""

import argparse
import json
import sys
from pathlib import Path

import structlog
import yaml

from src.shared.logging import setup_logging

logger = structlog.get_logger()


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="CardShield synthetic data generators")
    parser.add_argument(
        "generator",
        choices=["transaction"],
        help="Which generator to run",
    )
    parser.add_argument("--config", type=str, default=None, help="Path to YAML config file")
    parser.add_argument("--seed", type=int, default=42, help="Random seed for reproducibility")
    parser.add_argument("--count", type=int, default=100, help="Number of transactions")
    parser.add_argument(
        "--output",
        type=str,
        default="stdout",
        choices=["stdout", "file"],
        help="Output destination",
    )
    parser.add_argument("--output-file", type=str, default=None, help="Output file path")
    parser.add_argument(
        "--score",
        action="store_true",
        help="Run each transaction through a scorer and attach the analysis",
    )
    parser.add_argument("--log-level", type=str, default="WARNING", help="Log level (stderr)")

    args = parser.parse_args(argv)
    setup_logging(args.log_level, json_output=False, stream=sys.stderr)

    config = {}
    if args.config:
        with open(args.config) as f:
            config = yaml.safe_load(f) or {}

    from .transaction_generator import CardTransactionGenerator

    gen = CardTransactionGenerator(config=config, seed=args.seed)
    records = gen.generate(num_transactions=args.count)

    if args.score:
        from src.domains.fraud.exceptions import TransactionValidationError
        from src.domains.fraud.registry import ScorerRegistry
        from src.domains.fraud.validation import validate_transaction

        # One history per cardholder
        registry = ScorerRegistry()
        scored = []
        for record in records:
            try:
                transaction = validate_transaction(record)
            except TransactionValidationError as exc:
                logger.warning(
                    "record_skipped",
                    transaction_time=str(record["transaction_time"]),
                    fields=[e["field"] for e in exc.errors],
                )
                continue
            scorer = registry.get(record["cardholder_name"])
            analysis = scorer.evaluate(transaction)
            scored.append({**record, "analysis": analysis.model_dump(mode="json")})
        if len(scored) < len(records):
            logger.warning("records_not_scored", skipped=len(records) - len(scored))
        records = scored

    if args.output == "stdout":
        for record in records:
            print(json.dumps(record, default=str))
    else:
        output_path = args.output_file or f"output/{args.generator}_records.jsonl"
        Path(output_path).parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w") as f:
            for record in records:
                f.write(json.dumps(record, default=str) + "\n")
        print(f"Wrote {len(records)} records to {output_path}", file=sys.stderr)


if __name__ == "__main__":
    main()
