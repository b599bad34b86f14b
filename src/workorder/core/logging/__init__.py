from .setup import CorrelationIdFilter, configure_logging, get_logger, new_correlation_id

__all__ = ["CorrelationIdFilter", "configure_logging", "get_logger", "new_correlation_id"]
