"""Console rendering of a finished run."""

import json

from chaos_sequencer.engine.simulator import SequenceRun


def _fmt(value: float) -> str:
    return f"{value:.2f}"


def render_summary(run: SequenceRun) -> str:
    """Render the analysis block printed after a run."""
    stats = run.statistics
    lines = [
        "Chaotic Sequence Analysis",
        "========================",
        f"Generated {len(run.records)} transactions",
        f"Value Range: {stats.min} - {stats.max}",
        f"Mean: {_fmt(stats.mean)}, Median: {stats.median}",
        f"Std Dev: {_fmt(stats.stdev)}, Volatility: {_fmt(stats.volatility)}",
        f"Trend Strength: {_fmt(stats.trend_strength)}",
        f"IQR: {stats.iqr} (Q1: {stats.q1}, Q3: {stats.q3})",
    ]
    return "\n".join(lines)


def render_sample(run: SequenceRun, size: int = 10) -> str:
    """Render the first size records as indented JSON."""
    sample = [record.to_dict() for record in run.records[:size]]
    return json.dumps(sample, indent=2)
