"""Tests for the standard scenarios."""

from monkeysim.experiments import EXAMPLE_NOTES, run_relief, run_containment, solve


class TestScenarios:
    """Both scenarios on the canonical example."""

    def test_relief(self, example_configs):
        assert run_relief(example_configs) == 10605

    def test_containment(self, example_configs):
        assert run_containment(example_configs) == 2713310158

    def test_runs_are_independent(self, example_configs):
        assert run_relief(example_configs) == run_relief(example_configs)

    def test_solve(self):
        assert solve(EXAMPLE_NOTES) == (10605, 2713310158)
