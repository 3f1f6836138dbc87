import logging

PACKAGE_LOGGER = 'citation_forecast'

# record attributes supplied through `extra=` by the pipeline and fitters
RECORD_DEFAULTS = {
    'entity_id': '-',
    'model_kind': '-',
}


class _ForecastRecordFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        for name, default in RECORD_DEFAULTS.items():
            if not hasattr(record, name):
                setattr(record, name, default)
        return super().format(record)


class AnalysisFormatter(_ForecastRecordFormatter):
    """予測ログ用のフォーマッター (エンティティIDを付与)"""
    def __init__(self):
        super().__init__(
            fmt='%(asctime)s - %(levelname)s - [%(entity_id)s] %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )


class DetailedAnalysisFormatter(_ForecastRecordFormatter):
    """フィッティング詳細用のフォーマッター (モデル種別・発生箇所を付与)"""
    def __init__(self):
        super().__init__(
            fmt='%(asctime)s - %(levelname)s - [%(entity_id)s] [%(model_kind)s] - %(message)s\n'
                '  at %(name)s (%(filename)s:%(lineno)d)',
            datefmt='%Y-%m-%d %H:%M:%S'
        )


def setup_analysis_logging(level: int = logging.INFO, detailed: bool = False,
                           handler: logging.Handler = None) -> logging.Logger:
    """
    Attach a handler to the package logger.

    The library never installs handlers on its own; applications that want to
    see fitting and batch progress call this once at startup. Calling it again
    replaces the handler installed by the previous call.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in list(logger.handlers):
        if getattr(existing, '_citation_forecast_handler', False):
            logger.removeHandler(existing)

    handler = handler or logging.StreamHandler()
    handler.setFormatter(DetailedAnalysisFormatter() if detailed else AnalysisFormatter())
    handler._citation_forecast_handler = True

    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
