"""
Shared fixtures for the kiwis test suite.

Sections:
    - Configuration / Settings
    - Series fixtures
    - Missing values
"""
import hypothesis
import numpy as np
import pytest

import kiwis as ks
from kiwis import Series

# ----------------------------------------------------------------
# Configuration / Settings
# ----------------------------------------------------------------
# pytest


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: mark a test as slow")


def pytest_addoption(parser):
    parser.addoption("--skip-slow", action="store_true", help="skip slow tests")
    parser.addoption("--only-slow", action="store_true", help="run only slow tests")


def pytest_runtest_setup(item):
    if "slow" in item.keywords and item.config.getoption("--skip-slow"):
        pytest.skip("skipping due to --skip-slow")

    if "slow" not in item.keywords and item.config.getoption("--only-slow"):
        pytest.skip("skipping due to --only-slow")


# Hypothesis
hypothesis.settings.register_profile(
    "ci",
    # Hypothesis timing checks are tuned for scalars by default, so we bump
    # them from 200ms to 500ms per test case as the global default.  If this
    # is too short for a specific test, (a) try to make it faster, and (b)
    # if it really is slow add `@settings(deadline=...)` with a working value,
    # or `deadline=None` to entirely disable timeouts for that test.
    deadline=500,
    suppress_health_check=(hypothesis.HealthCheck.too_slow,),
)
hypothesis.settings.load_profile("ci")


@pytest.fixture(autouse=True)
def configure_tests():
    """
    Restore the default options after every test.
    """
    yield
    ks.reset_option("all")


@pytest.fixture(autouse=True)
def add_imports(doctest_namespace):
    """
    Make `np` and `ks` names available for doctests.
    """
    doctest_namespace["np"] = np
    doctest_namespace["ks"] = ks


# ----------------------------------------------------------------
# Series fixtures
# ----------------------------------------------------------------
@pytest.fixture
def numeric_series():
    """
    Fixture for a Series of ints and floats.
    """
    return Series([3, 1.5, 42, -7, 0, 101])


@pytest.fixture
def string_series():
    """
    Fixture for a Series of non-numeric strings.
    """
    return Series(["kiwi", "apple", "banana", "kiwi"])


@pytest.fixture
def mixed_series():
    """
    Fixture for a Series mixing numbers, numeric text, text and missing values.
    """
    return Series([1, "2", "a", None, "", 0, False, np.nan])


@pytest.fixture
def empty_series():
    """
    Fixture for an empty Series.
    """
    return Series()


# ----------------------------------------------------------------
# Missing values
# ----------------------------------------------------------------
@pytest.fixture(params=[None, np.nan, float("nan"), ""])
def nulls_fixture(request):
    """
    Fixture for each value that is always missing.
    """
    return request.param


@pytest.fixture(params=[0, 0.0, False])
def kept_falsy_fixture(request):
    """
    Fixture for each falsy value that is kept as data by default.
    """
    return request.param
