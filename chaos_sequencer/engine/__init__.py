"""Generation, enhancement and statistics entry points."""

from chaos_sequencer.engine.enhance import enhance
from chaos_sequencer.engine.generator import generate
from chaos_sequencer.engine.metrics import SequenceStatistics, summarize
from chaos_sequencer.engine.simulator import SequenceRun, run_sequence

__all__ = [
    "enhance",
    "generate",
    "summarize",
    "run_sequence",
    "SequenceRun",
    "SequenceStatistics",
]
