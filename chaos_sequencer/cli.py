"""Command-line interface for the chaotic sequence generator.

Orchestrates config loading, provider instantiation, the run
itself, console reporting and artifact generation.
"""

import argparse
import sys
from pathlib import Path

import structlog
import yaml
from pydantic import ValidationError

from chaos_sequencer.config.loader import load_config
from chaos_sequencer.config.schema import RunConfig
from chaos_sequencer.config.settings import get_settings
from chaos_sequencer.data.sources import PROVIDER_REGISTRY, get_provider
from chaos_sequencer.engine.simulator import run_sequence
from chaos_sequencer.logging_config import configure_logging
from chaos_sequencer.report.artifacts import write_artifacts
from chaos_sequencer.report.console import render_sample, render_summary


logger = structlog.get_logger()

# GeneratorConfig fields settable from the command line
GENERATOR_OVERRIDES = (
    "volatility",
    "trend_strength",
    "mean_reversion",
    "min_value",
    "max_value",
)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="chaos-sequencer",
        description="Generate a chaotic transaction sequence and summarize it",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to configuration YAML file (built-in defaults if omitted)",
    )
    parser.add_argument(
        "--steps",
        type=int,
        help="Sequence length (overrides config default)",
    )
    parser.add_argument("--volatility", type=float, help="Chaos scaling in [0, 1]")
    parser.add_argument("--trend-strength", type=float, help="Trend following weight in [0, 1]")
    parser.add_argument("--mean-reversion", type=float, help="Mean reversion weight in [0, 1]")
    parser.add_argument("--min-value", type=int, help="Inclusive lower bound")
    parser.add_argument("--max-value", type=int, help="Inclusive upper bound")
    parser.add_argument(
        "--provider",
        choices=sorted(PROVIDER_REGISTRY),
        help="Random provider (overrides config default)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for the seeded provider (implies --provider seeded)",
    )
    parser.add_argument(
        "--no-enhance",
        action="store_true",
        help="Skip the enhancement pass",
    )
    parser.add_argument(
        "--sample",
        type=int,
        help="Number of leading records to print (overrides config default)",
    )
    parser.add_argument(
        "--outdir",
        type=str,
        help="Output directory for artifacts (defaults to CHAOS_OUTPUT_DIR)",
    )
    parser.add_argument(
        "--no-save",
        action="store_true",
        help="Do not write artifacts",
    )
    return parser


def resolve_config(args: argparse.Namespace) -> RunConfig:
    """Merge YAML config and CLI overrides into a validated RunConfig.

    Raises:
        FileNotFoundError: If --config points to a missing file
        ValueError: If --seed is combined with an unseeded provider
        pydantic.ValidationError: If the merged values are invalid
    """
    if args.seed is not None and args.provider not in (None, "seeded"):
        raise ValueError(
            f"--seed requires the seeded provider, got --provider {args.provider}"
        )

    config = load_config(args.config) if args.config else RunConfig()

    generator = config.generator.model_dump()
    for field in GENERATOR_OVERRIDES:
        value = getattr(args, field)
        if value is not None:
            generator[field] = value

    defaults = config.defaults.model_dump()
    if args.steps is not None:
        defaults["steps"] = args.steps
    if args.seed is not None:
        defaults["seed"] = args.seed
        defaults["provider"] = "seeded"
    if args.provider is not None:
        defaults["provider"] = args.provider
    if args.no_enhance:
        defaults["enhanced"] = False
    if args.sample is not None:
        defaults["sample"] = args.sample

    return RunConfig(generator=generator, defaults=defaults)


def main(argv: list[str] | None = None) -> int:
    """Run the chaotic sequence CLI."""
    args = build_parser().parse_args(argv)
    try:
        settings = get_settings()
    except ValidationError as e:
        print(f"Invalid environment settings: {e}", file=sys.stderr)
        return 1
    configure_logging(settings.log_level, settings.log_format)

    try:
        config = resolve_config(args)
        defaults = config.defaults

        logger.info(
            "run_parameters",
            steps=defaults.steps,
            provider=defaults.provider,
            seed=defaults.seed,
            enhanced=defaults.enhanced,
        )

        provider = get_provider(defaults.provider, seed=defaults.seed)

        run = run_sequence(
            defaults.steps,
            config.generator,
            provider,
            enhanced=defaults.enhanced,
        )
    except (FileNotFoundError, yaml.YAMLError, ValueError) as e:
        # Core errors (SequenceError) and ValidationError are ValueErrors
        logger.error("run_failed", error=str(e))
        return 1

    print(render_summary(run))

    if not args.no_save:
        outdir = Path(args.outdir or settings.output_dir)
        try:
            paths = write_artifacts(run, outdir)
        except OSError as e:
            logger.error("artifact_write_failed", outdir=str(outdir), error=str(e))
            return 1
        print(f"\nDetailed analysis saved to {paths['analysis']}")

    if defaults.sample > 0:
        print(f"\nFirst {min(defaults.sample, len(run.records))} transactions:")
        print(render_sample(run, defaults.sample))

    return 0


if __name__ == "__main__":
    sys.exit(main())
