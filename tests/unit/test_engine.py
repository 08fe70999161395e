"""Unit tests for SimulationEngine."""

import pytest

from monkeysim.core import (
    Agent,
    AgentConfig,
    AddConstant,
    MultiplyByConstant,
    RoutingRule,
    SimulationEngine,
    SimulationConfig,
    RELIEF_CONFIG,
    CONTAINMENT_CONFIG,
    ReliefPolicy,
    ModularPolicy,
    ConfigurationError,
    InsufficientAgentsError,
    create_engine,
    monkey_business,
)


class TestSimulationConfig:
    """Tests for SimulationConfig."""

    def test_default_config(self):
        cfg = SimulationConfig()
        assert cfg.n_rounds == 20
        assert cfg.worry_mode == "relief"
        assert cfg.relief_divisor == 3
        assert cfg.top_n == 2

    def test_config_is_frozen(self):
        with pytest.raises(AttributeError):
            CONTAINMENT_CONFIG.n_rounds = 5
        assert CONTAINMENT_CONFIG.n_rounds == 10000

    def test_presets(self):
        assert RELIEF_CONFIG.n_rounds == 20
        assert RELIEF_CONFIG.worry_mode == "relief"
        assert CONTAINMENT_CONFIG.n_rounds == 10000
        assert CONTAINMENT_CONFIG.worry_mode == "containment"


class TestMonkeyBusiness:
    """Tests for the ranked metric."""

    def test_product_of_two_largest(self):
        assert monkey_business([101, 95, 7, 105]) == 10605

    def test_ties(self):
        assert monkey_business([4, 4, 1]) == 16

    def test_custom_top(self):
        assert monkey_business([2, 3, 4], top=3) == 24

    def test_too_few_agents(self):
        with pytest.raises(InsufficientAgentsError):
            monkey_business([5])

    @pytest.mark.parametrize("top", [0, -1, 1.5])
    def test_top_must_be_positive_integer(self, top):
        with pytest.raises(ValueError, match="top must be a positive integer"):
            monkey_business([3, 2, 1], top=top)


class TestEngineConstruction:
    """Configuration errors are raised before any round runs."""

    def test_create_engine_relief(self, example_configs):
        engine = create_engine(example_configs)
        assert isinstance(engine.policy, ReliefPolicy)
        assert engine.current_round == 0
        assert engine.inventory() == [2, 4, 3, 1]

    def test_create_engine_containment(self, example_configs):
        engine = create_engine(example_configs, SimulationConfig(worry_mode="containment"))
        assert isinstance(engine.policy, ModularPolicy)
        assert engine.policy.modulus == 96577

    def test_target_out_of_range(self):
        configs = [
            AgentConfig(items=[1], operation=AddConstant(1), routing=RoutingRule(2, 1, 0)),
            AgentConfig(items=[1], operation=AddConstant(1), routing=RoutingRule(3, 0, 2)),
        ]
        with pytest.raises(ConfigurationError, match="routes to 2"):
            create_engine(configs)

    def test_empty_agent_list(self):
        with pytest.raises(ConfigurationError):
            create_engine([])

    def test_index_mismatch(self):
        agent = Agent(1, AddConstant(1), RoutingRule(2, 0, 0), [1])
        with pytest.raises(ConfigurationError):
            SimulationEngine(agents=[agent], policy=ReliefPolicy())

    def test_negative_item_in_directly_built_agent(self):
        with pytest.raises(ConfigurationError, match="Worry level"):
            SimulationEngine(
                agents=[
                    Agent(0, AddConstant(0), RoutingRule(2, 1, 1), [-5]),
                    Agent(1, AddConstant(0), RoutingRule(2, 0, 0), [1]),
                ],
                policy=ReliefPolicy(),
            )

    def test_non_integer_divisor_rejected_before_containment(self):
        with pytest.raises(ConfigurationError):
            create_engine(
                [
                    AgentConfig(items=[1], operation=AddConstant(1), routing=RoutingRule(2.5, 1, 0)),
                    AgentConfig(items=[1], operation=AddConstant(1), routing=RoutingRule(3, 0, 0)),
                ],
                SimulationConfig(worry_mode="containment"),
            )

    def test_modulus_must_cover_all_divisors(self, example_configs):
        agents = [Agent.from_config(i, cfg) for i, cfg in enumerate(example_configs)]
        with pytest.raises(ConfigurationError, match="not a multiple"):
            SimulationEngine(agents=agents, policy=ModularPolicy(23 * 19 * 13))


class TestEngineRounds:
    """Tests for round mechanics."""

    def test_first_round_relief(self, example_configs):
        engine = create_engine(example_configs)
        engine.step()

        assert list(engine.agents[0].items) == [20, 23, 27, 26]
        assert list(engine.agents[1].items) == [2080, 25, 167, 207, 401, 1046]
        assert engine.inventory()[2:] == [0, 0]
        assert engine.activity_counts() == [2, 4, 3, 5]

    def test_higher_index_sees_items_same_round(self, example_configs):
        """Agent 3 inspects the items agents 0 and 2 threw to it this round."""
        engine = create_engine(example_configs)
        throws = engine.step()
        from_three = [t for t in throws if t.source == 3]
        assert [t.value for t in from_three] == [25, 167, 207, 401, 1046]

    def test_step_returns_all_throws(self, example_configs):
        engine = create_engine(example_configs)
        throws = engine.step()
        assert len(throws) == sum(engine.activity_counts())
        assert engine.current_round == 1

    def test_self_routing_waits_for_next_round(self, pair_configs):
        engine = create_engine(pair_configs, SimulationConfig(worry_mode="containment"))

        engine.step()
        assert engine.activity_counts() == [2, 1]
        assert list(engine.agents[0].items) == [4, 1]

        engine.step()
        assert engine.activity_counts() == [4, 2]

    def test_empty_queue_inspects_nothing(self):
        configs = [
            AgentConfig(items=[3, 5], operation=AddConstant(1), routing=RoutingRule(2, 1, 0)),
            AgentConfig(items=[], operation=MultiplyByConstant(2), routing=RoutingRule(3, 0, 0)),
            AgentConfig(items=[], operation=AddConstant(7), routing=RoutingRule(5, 0, 1)),
        ]
        engine = create_engine(configs, SimulationConfig(worry_mode="containment"))
        engine.simulate(5)
        assert engine.activity_counts()[2] == 0
        assert sum(engine.inventory()) == 2

    def test_items_conserved_every_round(self, example_configs):
        engine = create_engine(example_configs)
        total = sum(engine.inventory())
        for _ in range(20):
            engine.step()
            assert sum(engine.inventory()) == total

    def test_counters_equal_cumulative_inspections(self, example_configs):
        engine = create_engine(example_configs, SimulationConfig(worry_mode="containment"))
        seen = [0, 0, 0, 0]
        for _ in range(30):
            for throw in engine.step():
                seen[throw.source] += 1
            assert engine.activity_counts() == seen

    def test_simulate_zero_rounds(self, example_configs):
        engine = create_engine(example_configs)
        engine.simulate(0)
        assert engine.activity_counts() == [0, 0, 0, 0]

    def test_negative_rounds_rejected(self, example_configs):
        engine = create_engine(example_configs)
        with pytest.raises(ValueError):
            engine.simulate(-1)


class TestEngineRun:
    """End-to-end runs on the canonical example."""

    def test_relief_20_rounds(self, example_configs):
        engine = create_engine(example_configs)
        assert engine.run(20) == 10605
        assert engine.activity_counts() == [101, 95, 7, 105]

    def test_containment_first_round(self, example_configs):
        engine = create_engine(example_configs, SimulationConfig(worry_mode="containment"))
        engine.simulate(1)
        assert engine.activity_counts() == [2, 4, 3, 6]

    def test_containment_20_rounds(self, example_configs):
        engine = create_engine(example_configs, SimulationConfig(worry_mode="containment"))
        engine.simulate(20)
        assert engine.activity_counts() == [99, 97, 8, 103]

    def test_containment_10000_rounds(self, example_configs):
        engine = create_engine(example_configs, CONTAINMENT_CONFIG)
        assert engine.run(10000) == 2713310158
        assert engine.activity_counts() == [52166, 47830, 1938, 52013]

    def test_deterministic(self, example_configs):
        first = create_engine(example_configs, SimulationConfig(worry_mode="containment"))
        second = create_engine(example_configs, SimulationConfig(worry_mode="containment"))
        first.simulate(500)
        second.simulate(500)
        assert first.activity_counts() == second.activity_counts()
        assert [list(a.items) for a in first.agents] == [list(a.items) for a in second.agents]

    def test_single_agent_run_refused_before_rounds(self):
        configs = [AgentConfig(items=[1], operation=AddConstant(1), routing=RoutingRule(2, 0, 0))]
        engine = create_engine(configs)
        with pytest.raises(InsufficientAgentsError):
            engine.run(5)
        assert engine.current_round == 0

    @pytest.mark.parametrize("top", [0, -1])
    def test_bad_top_refused_before_rounds(self, pair_configs, top):
        engine = create_engine(pair_configs, SimulationConfig(worry_mode="containment"))
        with pytest.raises(ValueError):
            engine.run(3, top=top)
        assert engine.current_round == 0

    def test_debug_logging_per_round(self, example_configs, caplog):
        engine = create_engine(example_configs)
        with caplog.at_level("DEBUG", logger="monkeysim.core.engine"):
            engine.step()
        assert "Round 1: 14 throws, inspections=[2, 4, 3, 5]" in caplog.text

    def test_no_round_logging_above_debug(self, example_configs, caplog):
        engine = create_engine(example_configs)
        with caplog.at_level("INFO", logger="monkeysim.core.engine"):
            engine.simulate(3)
        assert "Round" not in caplog.text

    def test_summary(self, example_configs):
        engine = create_engine(example_configs)
        engine.simulate(20)
        stats = engine.summary()
        assert stats["current_round"] == 20
        assert stats["policy"] == "relief"
        assert stats["total_items"] == 10
        assert stats["total_inspections"] == 308
        assert stats["monkey_business"] == 10605
