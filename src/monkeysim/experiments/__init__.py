"""
Experiment harness: standard keep-away scenarios.

Pre-built scenarios for:
- Relief runs (20 rounds, worry divided by 3)
- Containment runs (10000 rounds, worry modulo the divisor LCM)
"""

from monkeysim.experiments.keep_away import EXAMPLE_NOTES, run_relief, run_containment, solve

__all__ = [
    "EXAMPLE_NOTES",
    "run_relief",
    "run_containment",
    "solve",
]
