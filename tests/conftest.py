"""Shared fixtures for the seasonal model tests."""

import pytest

from seasonal_epimodels.parameters import (
    CompactAirborneParams,
    CompactSoilborneParams,
    ElaborateAirborneParams,
    ElaborateSoilborneParams,
    TimeParam,
)
from seasonal_epimodels.variants import SeasonalModel


@pytest.fixture
def tp():
    return TimeParam(T=365.0, tau=180.0, dt=1.0)


@pytest.fixture
def compact_params():
    return CompactAirborneParams(alpha=0.1, beta=0.01, n=1000.0)


@pytest.fixture
def compact_model(compact_params):
    return SeasonalModel(compact_params)


@pytest.fixture
def elaborate_params():
    return ElaborateAirborneParams(alpha=0.1, beta=0.0005, n=1000.0,
                                   Lambda=0.02, Theta=0.0005, mu=0.01, Pi=1.0)


@pytest.fixture
def elaborate_model(elaborate_params):
    return SeasonalModel(elaborate_params)


@pytest.fixture
def soilborne_params():
    return CompactSoilborneParams(alpha=0.1, beta=0.0005, n=1000.0,
                                  theta=0.0005, Pi=1.0, mu=0.01, lam=0.02)


@pytest.fixture
def soilborne_model(soilborne_params):
    return SeasonalModel(soilborne_params)


@pytest.fixture
def elaborate_soilborne_model():
    return SeasonalModel(ElaborateSoilborneParams(alpha=0.1, beta=0.0005, n=1000.0,
                                                  theta=0.0005, lam=0.02, mu=0.01, Pi=1.0))
