"""
Pytest configuration and shared fixtures.
"""

import matplotlib
matplotlib.use("Agg")

import pytest


@pytest.fixture
def example_configs():
    """The canonical four-agent example."""
    from monkeysim.experiments import EXAMPLE_NOTES
    from monkeysim.notes import parse_notes
    return parse_notes(EXAMPLE_NOTES)


@pytest.fixture
def pair_configs():
    """Two agents: agent 0 keeps even items, agent 1 passes everything to 0."""
    from monkeysim.core import AgentConfig, AddConstant, MultiplyByConstant, RoutingRule
    return [
        AgentConfig(items=[4, 7], operation=AddConstant(0), routing=RoutingRule(2, 0, 1)),
        AgentConfig(items=[], operation=MultiplyByConstant(1), routing=RoutingRule(3, 0, 0)),
    ]
