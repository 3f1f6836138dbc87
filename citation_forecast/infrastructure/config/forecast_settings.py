# citation_forecast/infrastructure/config/forecast_settings.py

import os
from typing import Dict, Optional

from dotenv import load_dotenv

load_dotenv()

FORECAST_SETTINGS = {
    'default': {
        'horizon': 10,                    # forecast years after the last observed year
        'minimum_data_points': 3,         # fewest observations that can separate the models
        'max_nfev': 2000,                 # optimizer evaluation budget per nonlinear fit
        'fit_time_budget_seconds': None,  # optional wall-clock budget per nonlinear fit
        'max_workers': None               # ThreadPoolExecutor default
    },
    'strict': {
        'horizon': 10,
        'minimum_data_points': 5,
        'max_nfev': 500,
        'fit_time_budget_seconds': 1.0,
        'max_workers': None
    }
}

# environment variable -> (settings key, parser)
ENVIRONMENT_OVERRIDES = {
    'CITATION_FORECAST_HORIZON': ('horizon', int),
    'CITATION_FORECAST_MAX_NFEV': ('max_nfev', int),
    'CITATION_FORECAST_FIT_TIME_BUDGET': ('fit_time_budget_seconds', float),
    'CITATION_FORECAST_MAX_WORKERS': ('max_workers', int),
}


def get_forecast_settings(profile: str = 'default',
                          environ: Optional[Dict[str, str]] = None) -> Dict:
    """
    Return the settings for a profile with environment overrides applied

    Parameters:
    -----------
    profile : str
        Profile name (e.g. 'strict'). Unknown names fall back to 'default'.
    environ : dict, optional
        Environment to read overrides from. Defaults to os.environ.

    Returns:
    --------
    Dict
        A fresh copy of the settings dictionary
    """
    settings = dict(FORECAST_SETTINGS.get(profile, FORECAST_SETTINGS['default']))
    environ = os.environ if environ is None else environ

    for variable, (key, parser) in ENVIRONMENT_OVERRIDES.items():
        raw = environ.get(variable)
        if raw is None or raw.strip() == '':
            continue
        if key == 'fit_time_budget_seconds' and raw.strip().lower() == 'none':
            settings[key] = None
            continue
        try:
            settings[key] = parser(raw)
        except ValueError as e:
            raise ValueError(f"Invalid value for {variable}: {raw!r}") from e

    return settings
