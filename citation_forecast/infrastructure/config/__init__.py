from .forecast_settings import FORECAST_SETTINGS, get_forecast_settings

__all__ = ['FORECAST_SETTINGS', 'get_forecast_settings']
