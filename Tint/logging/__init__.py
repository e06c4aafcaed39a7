from Tint.logging.base_logging import LOG, Logging, LogLevel, logging_instance

__all__ = ["LOG", "Logging", "LogLevel", "logging_instance"]
