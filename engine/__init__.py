"""
engine/
-------
Recording & analytics layer.

    from engine import Recorder, RunMetrics, compare
"""

from engine.recorder import Recorder, RunMetrics, ComparisonResult, compare

__all__ = [
    "Recorder",
    "RunMetrics",
    "ComparisonResult",
    "compare",
]
