from .logger_factory_service import configure_logging, get_logger
from .redaction_processor import redact_dict, redact_text

__all__ = [
    "configure_logging",
    "get_logger",
    "redact_dict",
    "redact_text",
]
