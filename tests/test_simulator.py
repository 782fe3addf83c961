"""Tests for the sequence pipeline and report adapters."""

import json

import pandas as pd
import pytest
from chaos_sequencer.config.schema import GeneratorConfig
from chaos_sequencer.data.sources import SeededRandomProvider
from chaos_sequencer.engine.simulator import run_sequence
from chaos_sequencer.errors import InvalidArgumentError
from chaos_sequencer.report.artifacts import ANALYSIS_FILENAME, SEQUENCE_FILENAME, write_artifacts
from chaos_sequencer.report.console import render_sample, render_summary


CONFIG = GeneratorConfig(volatility=0.8, max_value=500)


def test_run_sequence_deterministic():
    """Test that run_sequence is deterministic with a seeded provider."""
    run1 = run_sequence(50, CONFIG, SeededRandomProvider(seed=42))
    run2 = run_sequence(50, CONFIG, SeededRandomProvider(seed=42))

    assert [r.model_dump() for r in run1.records] == [r.model_dump() for r in run2.records]
    assert run1.statistics == run2.statistics


def test_run_sequence_enhanced_and_plain():
    """Test that the enhancement pass leaves base values unchanged."""
    enhanced = run_sequence(30, CONFIG, SeededRandomProvider(seed=1))
    plain = run_sequence(30, CONFIG, SeededRandomProvider(seed=1), enhanced=False)

    assert all(r.is_enhanced for r in enhanced.records)
    assert not any(r.is_enhanced for r in plain.records)
    # Generation draws come first, so base values match
    assert [r.value for r in enhanced.records] == [r.value for r in plain.records]


def test_run_sequence_propagates_invalid_argument():
    """Test that generation errors reach the caller."""
    with pytest.raises(InvalidArgumentError):
        run_sequence(1, CONFIG, SeededRandomProvider(seed=0))


def test_to_frame_columns():
    """Test DataFrame columns for enhanced and plain runs."""
    run = run_sequence(10, CONFIG, SeededRandomProvider(seed=3))
    df = run.to_frame()

    assert isinstance(df, pd.DataFrame)
    assert list(df.columns) == ["step", "value", "regime", "enhanced_value", "enhancement_delta"]
    assert len(df) == 10
    assert df["regime"].iloc[0] == "initial"

    plain = run_sequence(10, CONFIG, SeededRandomProvider(seed=3), enhanced=False)
    assert list(plain.to_frame().columns) == ["step", "value", "regime"]


def test_to_dict_layout():
    """Test the metadata, statistics and sequence layout."""
    run = run_sequence(12, CONFIG, SeededRandomProvider(seed=4), enhanced=False)
    data = run.to_dict()

    assert data["metadata"]["sequence_length"] == 12
    assert data["metadata"]["config"]["max_value"] == 500
    assert set(data["statistics"]) >= {"mean", "median", "stdev", "q1", "q3", "iqr", "trend_strength", "volatility"}
    assert set(data["sequence"][0]) == {"step", "value", "regime"}


def test_write_artifacts_creates_and_truncates(tmp_path):
    """Test that artifacts are created and then overwritten."""
    outdir = tmp_path / "out"
    run = run_sequence(20, CONFIG, SeededRandomProvider(seed=5))

    paths = write_artifacts(run, outdir)
    assert paths["analysis"] == outdir / ANALYSIS_FILENAME
    assert paths["sequence"] == outdir / SEQUENCE_FILENAME

    smaller = run_sequence(5, CONFIG, SeededRandomProvider(seed=6))
    write_artifacts(smaller, outdir)

    data = json.loads(paths["analysis"].read_text())
    assert data["metadata"]["sequence_length"] == 5
    assert len(data["sequence"]) == 5
    assert data["sequence"][0]["regime"] == "initial"
    assert "enhanced_value" in data["sequence"][0]

    df = pd.read_csv(paths["sequence"])
    assert len(df) == 5


def test_render_summary_and_sample():
    """Test the console summary block and record sample."""
    run = run_sequence(15, CONFIG, SeededRandomProvider(seed=7))

    summary = render_summary(run)
    assert summary.startswith("Chaotic Sequence Analysis")
    assert "Generated 15 transactions" in summary
    assert f"IQR: {run.statistics.iqr}" in summary

    sample = json.loads(render_sample(run, 3))
    assert [r["step"] for r in sample] == [0, 1, 2]
