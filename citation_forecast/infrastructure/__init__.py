"""
Infrastructure Layer - Support Systems and Utilities

Components:
    config/: Forecast settings profiles and environment overrides
    error_handling/: Domain error types and per-entity failure records
    logging/: Formatters and opt-in handler setup for the package logger
"""
