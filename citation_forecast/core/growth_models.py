"""
Pure growth model functions for cumulative citation counts

Mathematical forms:
    Linear:      C(year) = alpha + beta * year
    Exponential: C(t)    = a * exp(b * t)
    Asymptotic:  C(t)    = a * (1 - exp(-b * t))

For the nonlinear forms t = year - origin_year, where origin_year is the first
observed year of the fitted series.
"""

import numpy as np

from .time_series import ModelKind


def linear_func(year: np.ndarray, alpha: float, beta: float) -> np.ndarray:
    """
    Linear growth model

    Args:
        year: Absolute calendar years
        alpha: Intercept (citations at year 0)
        beta: Slope (citations gained per year)
    """
    return alpha + beta * np.asarray(year, dtype=float)


def exponential_func(t: np.ndarray, a: float, b: float) -> np.ndarray:
    """
    Exponential growth model

    Args:
        t: Years since the first observation
        a: Citations at t = 0
        b: Continuous growth rate per year
    """
    return a * np.exp(b * np.asarray(t, dtype=float))


def asymptotic_func(t: np.ndarray, a: float, b: float) -> np.ndarray:
    """
    Saturating growth model approaching the ceiling a

    Args:
        t: Years since the first observation
        a: Asymptotic citation ceiling
        b: Saturation rate per year
    """
    return a * (1.0 - np.exp(-b * np.asarray(t, dtype=float)))


# ModelKind -> (function, parameter names, uses shifted time)
MODEL_FUNCTIONS = {
    ModelKind.LINEAR: (linear_func, ('alpha', 'beta'), False),
    ModelKind.EXPONENTIAL: (exponential_func, ('a', 'b'), True),
    ModelKind.ASYMPTOTIC: (asymptotic_func, ('a', 'b'), True),
}


def evaluate_model(kind: ModelKind, years, parameters: dict, origin_year: float) -> np.ndarray:
    """Evaluate a growth model at absolute years"""
    func, names, shifted = MODEL_FUNCTIONS[kind]
    x = np.asarray(years, dtype=float)
    if shifted:
        x = x - origin_year
    return func(x, *(parameters[name] for name in names))
