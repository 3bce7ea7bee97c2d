"""Writing rendered graphs and analysis results to disk."""

from output.utils import dump_json
from output.verify import DeterminismResult, verify_outputs
from output.write import generate_outputs, write_analysis, write_renderings

__all__ = [
    "DeterminismResult",
    "dump_json",
    "generate_outputs",
    "verify_outputs",
    "write_analysis",
    "write_renderings",
]
