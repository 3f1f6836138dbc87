from .formatters import AnalysisFormatter, DetailedAnalysisFormatter, setup_analysis_logging

__all__ = ['AnalysisFormatter', 'DetailedAnalysisFormatter', 'setup_analysis_logging']
