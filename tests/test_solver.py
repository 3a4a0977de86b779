"""Tests for seasonal_epimodels.solver — sampling grid and solve_ivp wrapper."""

import inspect
from types import SimpleNamespace

import numpy as np
import pytest

import seasonal_epimodels
import seasonal_epimodels.solver as solver_module
from seasonal_epimodels.errors import ContractViolation, IntegrationFailure
from seasonal_epimodels.solver import METHODS, SolverOptions, integrate, sampling_times


def _decay(t, y, p):
    return -p.k * y


# ── Sampling grid ─────────────────────────────────────────────────────

class TestSamplingTimes:
    def test_growing_season_daily(self):
        t = sampling_times((0.0, 180.0), 1.0)
        assert len(t) == 181
        assert t[0] == 0.0
        assert t[-1] == 180.0

    def test_winter_season_daily(self):
        t = sampling_times((180.0, 365.0), 1.0)
        assert len(t) == 186
        assert t[0] == 180.0
        assert t[-1] == 365.0

    def test_span_not_multiple_of_step(self):
        np.testing.assert_allclose(sampling_times((0.0, 10.0), 3.0), [0.0, 3.0, 6.0, 9.0, 10.0])

    def test_fractional_step_ends_exactly(self):
        t = sampling_times((0.0, 1.0), 0.1)
        assert len(t) == 11
        assert t[-1] == 1.0

    def test_strictly_increasing(self):
        t = sampling_times((180.0, 365.0), 0.7)
        assert np.all(np.diff(t) > 0)


# ── integrate ─────────────────────────────────────────────────────────

class TestIntegrate:
    def test_exponential_decay(self):
        p = SimpleNamespace(k=0.05)
        t, y = integrate(_decay, [10.0], (0.0, 50.0), p, 1.0)
        assert y.shape == (1, 51)
        np.testing.assert_allclose(y[0], 10.0 * np.exp(-0.05 * t), rtol=1e-5)

    def test_params_passed_through(self):
        t, y = integrate(_decay, [1.0, 2.0], (0.0, 10.0), SimpleNamespace(k=0.0), 2.0)
        np.testing.assert_allclose(y, [[1.0] * 6, [2.0] * 6])

    def test_other_methods(self):
        p = SimpleNamespace(k=0.1)
        for method in ("LSODA", "Radau", "DOP853"):
            t, y = integrate(_decay, [5.0], (0.0, 20.0), p, 1.0, SolverOptions(method=method))
            np.testing.assert_allclose(y[0], 5.0 * np.exp(-0.1 * t), rtol=1e-4)

    def test_solver_failure_raises(self, monkeypatch):
        def failing_solve_ivp(**kwargs):
            return SimpleNamespace(success=False, message="Required step size is less than spacing",
                                   t=np.array([0.0]), y=np.array([[1.0]]))
        monkeypatch.setattr(solver_module, "solve_ivp", failing_solve_ivp)
        with pytest.raises(IntegrationFailure, match="ODE solver failed"):
            integrate(_decay, [1.0], (0.0, 10.0), SimpleNamespace(k=1.0), 1.0)

    def test_non_finite_solution_raises(self, monkeypatch):
        def nan_solve_ivp(**kwargs):
            t = kwargs["t_eval"]
            return SimpleNamespace(success=True, message="", t=t, y=np.full((1, len(t)), np.nan))
        monkeypatch.setattr(solver_module, "solve_ivp", nan_solve_ivp)
        with pytest.raises(IntegrationFailure):
            integrate(_decay, [1.0], (0.0, 10.0), SimpleNamespace(k=1.0), 1.0)

    def test_integration_failure_is_runtime_error(self):
        assert issubclass(IntegrationFailure, RuntimeError)


# ── Solver options ────────────────────────────────────────────────────

class TestSolverOptions:
    def test_defaults(self):
        solver = SolverOptions()
        assert (solver.method, solver.rtol, solver.atol) == ("RK45", 1e-6, 1e-8)

    @pytest.mark.parametrize("method", METHODS)
    def test_known_methods(self, method):
        assert SolverOptions(method=method).method == method

    def test_unknown_method(self):
        with pytest.raises(ContractViolation, match="unknown solver method"):
            SolverOptions(method="NOPE")

    @pytest.mark.parametrize("field, value", [
        ("rtol", 0.0), ("atol", -1e-8), ("max_step", 0.0), ("rtol", float("nan")), ("atol", "1e-8"),
    ])
    def test_bad_tolerances(self, field, value):
        with pytest.raises(ContractViolation):
            SolverOptions(**{field: value})

    def test_module_not_shadowed_by_function(self):
        assert inspect.ismodule(seasonal_epimodels.solver)
        assert seasonal_epimodels.integrate is integrate
