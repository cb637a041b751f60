from .core import PatternOutcome, run_pattern, run_session, all_possible
from .io import format_outcome, write_csv, write_manifest

__all__ = ["PatternOutcome", "run_pattern", "run_session", "all_possible", "format_outcome",
           "write_csv", "write_manifest"]
