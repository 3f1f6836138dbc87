"""
Fit quality metrics shared by every growth model

All three models are scored with one likelihood convention so that their AIC
values are directly comparable:

    sigma^2 = RSS / n                      (maximum likelihood variance)
    ln L    = -n/2 * (ln(2*pi) + ln(RSS/n) + 1)
    AIC     = 2k - 2 ln L,   k = parameter_count + 1 (variance)
"""

from typing import Dict

import numpy as np
from sklearn.metrics import mean_squared_error, r2_score

# Exact fits floor RSS here so AIC stays finite and numerically exact fits tie.
RSS_RELATIVE_FLOOR = np.finfo(float).eps


def residual_sum_of_squares(y_true: np.ndarray, y_pred: np.ndarray) -> float:
    """残差平方和"""
    return float(np.sum((np.asarray(y_true, dtype=float) - np.asarray(y_pred, dtype=float)) ** 2))


def rss_floor(y_true: np.ndarray) -> float:
    scale = float(np.sum(np.asarray(y_true, dtype=float) ** 2))
    return max(np.finfo(float).tiny, RSS_RELATIVE_FLOOR * scale)


def gaussian_log_likelihood(rss: float, n: int) -> float:
    return -0.5 * n * (np.log(2.0 * np.pi) + np.log(rss / n) + 1.0)


def akaike_information_criterion(log_likelihood: float, parameter_count: int) -> float:
    k = parameter_count + 1
    return 2.0 * k - 2.0 * log_likelihood


def calculate_fit_metrics(y_true: np.ndarray, y_pred: np.ndarray, parameter_count: int) -> Dict[str, float]:
    """
    Compute RSS, log-likelihood, AIC, R² and RMSE for one fitted model

    Returns:
        dict with keys rss, log_likelihood, aic, r_squared, rmse
    """
    y_true = np.asarray(y_true, dtype=float)
    y_pred = np.asarray(y_pred, dtype=float)
    n = len(y_true)

    rss = max(residual_sum_of_squares(y_true, y_pred), rss_floor(y_true))
    log_likelihood = gaussian_log_likelihood(rss, n)

    return {
        'rss': rss,
        'log_likelihood': float(log_likelihood),
        'aic': float(akaike_information_criterion(log_likelihood, parameter_count)),
        'r_squared': float(r2_score(y_true, y_pred)),
        'rmse': float(np.sqrt(mean_squared_error(y_true, y_pred)))
    }
