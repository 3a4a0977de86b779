"""Tests for seasonal_epimodels.season — growing and winter season simulation."""

import numpy as np
import pytest

import seasonal_epimodels.season as season_module
from seasonal_epimodels.errors import ContractViolation, IntegrationFailure
from seasonal_epimodels.parameters import (
    CompactAirborneParams,
    ElaborateAirborneParams,
    ModelVariant,
)
from seasonal_epimodels.season import simulate_growing, simulate_season, simulate_winter
from seasonal_epimodels.seasons import Season
from seasonal_epimodels.states import CompactState, ElaborateState
from seasonal_epimodels.trajectory import Trajectory
from seasonal_epimodels.variants import SeasonalModel


# ── Growing season ────────────────────────────────────────────────────

class TestGrowingSeason:
    def test_returns_trajectory_and_final_state(self, compact_model, tp):
        traj, end = simulate_growing(CompactState(S=999, I=1), compact_model, tp)
        assert isinstance(traj, Trajectory)
        assert isinstance(end, CompactState)
        assert traj.compartments == ("S", "I")
        assert traj.time[0] == 0.0
        assert traj.time[-1] == 180.0
        np.testing.assert_array_equal(end.as_array(), traj.values[:, -1])

    def test_as_columns_layout(self, compact_model, tp):
        traj, _ = simulate_growing(CompactState(S=999, I=1), compact_model, tp)
        cols = traj.as_columns()
        assert len(cols) == 3
        np.testing.assert_array_equal(cols[0], traj.time)
        assert all(len(c) == len(traj) for c in cols)

    def test_no_transmission_infected_non_increasing(self, tp):
        model = SeasonalModel(CompactAirborneParams(alpha=0.1, beta=0.0, n=1000))
        traj, _ = simulate_growing(CompactState(S=900, I=100), model, tp)
        I = traj.column("I")
        assert np.all(np.diff(I) <= 1e-9)
        np.testing.assert_allclose(traj.column("S"), 900.0)

    def test_epidemic_curve(self, compact_model, tp):
        traj, _ = simulate_growing(CompactState(S=999, I=1), compact_model, tp)
        I = traj.column("I")
        peak = int(np.argmax(I))
        assert 0 < peak < len(I) - 1
        assert I[peak] > 500
        assert np.all(np.diff(I[:peak + 1]) > 0)
        assert np.all(np.diff(I[peak:]) < 0)

    def test_reproducible(self, compact_model, tp):
        a, _ = simulate_growing(CompactState(S=999, I=1), compact_model, tp)
        b, _ = simulate_growing(CompactState(S=999, I=1), compact_model, tp)
        Ia, Ib = a.column("I"), b.column("I")
        assert int(np.argmax(Ia)) == int(np.argmax(Ib))
        np.testing.assert_allclose(Ia, Ib, rtol=1e-10)

    def test_inoculum_decouples_without_primary_infection(self, tp):
        model = SeasonalModel(ElaborateAirborneParams(alpha=0.1, beta=0.0005, n=1000,
                                                      Lambda=0.02, Theta=0.0, mu=0.01, Pi=1.0))
        traj, _ = simulate_growing(ElaborateState(P=50, S=999, I=1), model, tp)
        np.testing.assert_allclose(traj.column("P"), 50 * np.exp(-0.02 * traj.time), rtol=1e-4)

    def test_accepts_plain_sequence(self, compact_model, tp):
        traj, end = simulate_growing([999.0, 1.0], compact_model, tp)
        assert isinstance(end, CompactState)


# ── Winter season ─────────────────────────────────────────────────────

class TestWinterSeason:
    def test_handoff_then_decay(self, elaborate_model, tp):
        growing_end = ElaborateState(P=4.0, S=300.0, I=20.0)
        traj, end = simulate_winter(growing_end, elaborate_model, tp)
        assert traj.time[0] == 180.0
        assert traj.time[-1] == 365.0
        P0 = 4.0 + 1.0 * 20.0
        np.testing.assert_allclose(traj.column("P"), P0 * np.exp(-0.01 * (traj.time - 180.0)), rtol=1e-4)
        assert end.P == pytest.approx(traj.column("P")[-1])

    def test_hosts_frozen(self, elaborate_model, tp):
        traj, _ = simulate_season(ElaborateState(P=10.0, S=250.0, I=5.0), elaborate_model,
                                  tp.tspanw, tp.dt, Season.WINTER)
        assert np.all(traj.column("S") == 250.0)
        assert np.all(traj.column("I") == 5.0)

    def test_winter_for_compact_raises(self, compact_model, tp):
        with pytest.raises(ContractViolation) as info:
            simulate_season(CompactState(S=10, I=1), compact_model, tp.tspanw, tp.dt, Season.WINTER)
        assert info.value.season is Season.WINTER
        assert info.value.variant is ModelVariant.COMPACT_AIRBORNE

    def test_simulate_winter_for_compact_raises(self, soilborne_model, tp):
        with pytest.raises(ContractViolation):
            simulate_winter(CompactState(S=10, I=1), soilborne_model, tp)


# ── Preconditions and failures ────────────────────────────────────────

class TestSeasonContracts:
    def test_state_type_mismatch(self, compact_model, tp):
        with pytest.raises(ContractViolation, match="statelength"):
            simulate_growing(ElaborateState(P=1, S=2, I=3), compact_model, tp)

    def test_sequence_length_mismatch(self, elaborate_model, tp):
        with pytest.raises(ContractViolation):
            simulate_growing([999.0, 1.0], elaborate_model, tp)

    def test_empty_span(self, compact_model):
        with pytest.raises(ContractViolation):
            simulate_season(CompactState(S=1, I=1), compact_model, (10.0, 10.0), 1.0)

    def test_non_positive_step(self, compact_model):
        with pytest.raises(ContractViolation):
            simulate_season(CompactState(S=1, I=1), compact_model, (0.0, 10.0), 0.0)

    def test_integration_failure_gets_context(self, monkeypatch, elaborate_model, tp):
        def failing(*args, **kwargs):
            raise IntegrationFailure("ODE solver failed: diverged")
        monkeypatch.setattr(season_module, "integrate", failing)
        with pytest.raises(IntegrationFailure) as info:
            simulate_growing(ElaborateState(P=1, S=1000, I=0), elaborate_model, tp)
        assert info.value.season is Season.GROWING
        assert info.value.variant is ModelVariant.ELABORATE_AIRBORNE
        assert "GROWING" in str(info.value)

    def test_negative_compartment_warns(self, monkeypatch, compact_model, tp):
        def negative(rhs, state0, time_span, params, dt, solver):
            t = np.array([0.0, 1.0])
            return t, np.array([[10.0, -1.0], [1.0, 2.0]])
        monkeypatch.setattr(season_module, "integrate", negative)
        with pytest.warns(RuntimeWarning, match="negative"):
            traj, end = simulate_growing(CompactState(S=10, I=1), compact_model, tp)
        assert end.S == -1.0
