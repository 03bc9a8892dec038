from .context import get_log_context, log_context
from .json_formatter import JSONFormatter
from .redact import mask_secret, redact_string
from .setup import configure_logging

__all__ = ["configure_logging", "JSONFormatter", "get_log_context", "log_context", "mask_secret", "redact_string"]
