"""
Structured logging for vector store operations.
"""

import logging
from typing import Any, Dict

from src.core.config import get_log_level


class StructuredLogger:
    """Structured logger for vector store inserts, queries and rejections."""

    def __init__(self, name: str = "vector_store"):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(get_log_level())

        # Create handler if not already set
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)

    @staticmethod
    def _format(operation: str, status: str, details: Dict[str, Any] = None) -> str:
        message = f"Operation: {operation}, Status: {status}"
        if details:
            message += f", Details: {details}"
        return message

    def log_operation(self, operation: str, status: str, details: Dict[str, Any] = None, level: int = logging.INFO):
        """Log a structured operation."""
        self.logger.log(level, self._format(operation, status, details))

    def log_vector_operation(self, operation: str, record_id: Any, details: Dict[str, Any] = None,
                             status: str = "success", level: int = logging.DEBUG):
        """Log a vector operation against a single record."""
        log_details = {"record_id": str(record_id)}
        if details:
            log_details.update(details)

        self.log_operation(f"vector.{operation}", status, log_details, level)

    def log_query(self, k: int, returned: int, details: Dict[str, Any] = None, level: int = logging.DEBUG):
        """Log a top-k query."""
        log_details = {"k": k, "returned": returned}
        if details:
            log_details.update(details)

        self.log_operation("vector.query_top_k", "success", log_details, level)

    def log_rejection(self, operation: str, reason: str, details: Dict[str, Any] = None):
        """Log an input the store refused, before the error is raised."""
        log_details = {"reason": reason}
        if details:
            log_details.update(details)

        self.log_operation(f"vector.{operation}", "rejected", log_details, logging.WARNING)

    # Standard logging methods for compatibility
    def info(self, message: str) -> None:
        """Log an info message."""
        self.logger.info(message)

    def warning(self, message: str) -> None:
        """Log a warning message."""
        self.logger.warning(message)

    def error(self, message: str) -> None:
        """Log an error message."""
        self.logger.error(message)

    def debug(self, message: str) -> None:
        """Log a debug message."""
        self.logger.debug(message)


# Global logger instance
logger = StructuredLogger()
