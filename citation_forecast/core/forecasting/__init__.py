from .forecaster import DEFAULT_HORIZON, ForecastPoint, check_horizon, forecast, forecast_years

__all__ = ['DEFAULT_HORIZON', 'ForecastPoint', 'check_horizon', 'forecast', 'forecast_years']
