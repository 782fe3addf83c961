"""Artifact writers for finished runs.

Files are created or truncated on every write.
"""

import json
from pathlib import Path

import structlog

from chaos_sequencer.engine.simulator import SequenceRun


logger = structlog.get_logger()

ANALYSIS_FILENAME = "chaotic_transaction_analysis.json"
SEQUENCE_FILENAME = "sequence.csv"


def save_json(data, path: str | Path) -> Path:
    """Write data as indented JSON, creating or truncating the file.

    Args:
        data: JSON-serializable object
        path: Destination file

    Returns:
        Path written

    Raises:
        OSError: If the file cannot be created or written
    """
    path = Path(path)
    with open(path, "w") as f:
        json.dump(data, f, indent=2)
        f.write("\n")
    return path


def write_artifacts(run: SequenceRun, outdir: str | Path) -> dict[str, Path]:
    """Write the analysis JSON and the sequence CSV.

    Args:
        run: Finished run
        outdir: Output directory, created if missing

    Returns:
        Mapping from artifact kind to written path
    """
    outdir = Path(outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    analysis_path = save_json(run.to_dict(), outdir / ANALYSIS_FILENAME)

    sequence_path = outdir / SEQUENCE_FILENAME
    run.to_frame().to_csv(sequence_path, index=False)

    logger.info("artifacts_written", analysis=str(analysis_path), sequence=str(sequence_path))
    return {"analysis": analysis_path, "sequence": sequence_path}
