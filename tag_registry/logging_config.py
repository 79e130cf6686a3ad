"""
Logging Configuration Module

This module provides thread-safe logging configuration for the registry
service, including setup for queue-based logging and silencing of noisy
third-party libraries.
"""

import logging
import logging.handlers
import sys
from queue import Queue
from typing import Optional


class ThreadSafeLoggingConfig:
    """Thread-safe logging configuration with queue-based logging."""
    
    def __init__(self):
        self._log_listener: Optional[logging.handlers.QueueListener] = None
        self._log_queue: Optional[Queue] = None
    
    def setup_logging(self, debug: bool = False) -> None:
        """
        Configure thread-safe logging for the service and silence chatty libraries.
        
        Request threads write to a queue and a single listener thread
        formats and prints, so lines from concurrent requests never mix.
        
        Args:
            debug: Whether to enable debug logging
        """
        # Calling twice must not leak a second listener thread
        self.stop()

        self._log_queue = Queue()
        queue_handler = logging.handlers.QueueHandler(self._log_queue)
        
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s")
        )
        
        self._log_listener = logging.handlers.QueueListener(
            self._log_queue, console_handler, respect_handler_level=True
        )
        self._log_listener.start()
        
        root_logger = logging.getLogger()
        root_logger.handlers.clear()
        root_logger.addHandler(queue_handler)
        root_logger.setLevel(logging.DEBUG if debug else logging.INFO)
        
        if not debug:
            self._silence_noisy_libraries()
    
    def _silence_noisy_libraries(self) -> None:
        """Silence noisy third-party libraries."""
        noisy_loggers = [
            "urllib3",
            "requests",
            "werkzeug",
        ]
        
        for name in noisy_loggers:
            logger = logging.getLogger(name)
            logger.setLevel(logging.WARNING)
    
    def stop(self) -> None:
        """Stop the logging listener and cleanup."""
        if self._log_listener:
            self._log_listener.stop()
            self._log_listener = None
        if self._log_queue:
            self._log_queue = None


# Global logging configuration instance
logging_config = ThreadSafeLoggingConfig()


def setup_logging(debug: bool = False) -> None:
    """
    Setup thread-safe logging configuration.
    
    Args:
        debug: Whether to enable debug logging
    """
    logging_config.setup_logging(debug)


def stop_logging() -> None:
    """Stop the logging listener and cleanup."""
    logging_config.stop()


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the specified name."""
    return logging.getLogger(name)
