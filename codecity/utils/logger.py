"""Logger utility module for logging messages with configurable logging levels and handlers."""
import logging
import os
from datetime import datetime

_LOGGER_NAME = 'CodeCity'
_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class Logger:
    """Singleton logger class for the layout engine.

    This class provides a centralized logging mechanism with configurable options
    for enabling/disabling logging and console output.
    """
    _instance = None
    _initialized = False
    _logging_enabled = True
    _log_to_console = True
    _log_to_file = False

    @classmethod
    def configure(cls, logging_enabled=True, log_to_console=True, log_to_file=False):
        """Configure global logging settings.

        Changing the settings after loggers have been handed out reinstalls the
        handlers, so the same child loggers follow the new settings.

        Args:
            logging_enabled: Whether logging is enabled globally.
            log_to_console: Whether to output logs to console.
            log_to_file: Whether to output logs to file.
        """
        settings = (bool(logging_enabled), bool(log_to_console), bool(log_to_file))
        if settings == (cls._logging_enabled, cls._log_to_console, cls._log_to_file):
            return
        cls._logging_enabled, cls._log_to_console, cls._log_to_file = settings
        if cls._initialized:
            cls.reset()

    @classmethod
    def configure_from(cls, config):
        """Configure logging from the `codecity.logging` section of a Config."""
        cls.configure(
            logging_enabled=config.get('codecity.logging.enabled', True),
            log_to_console=config.get('codecity.logging.to_console', True),
            log_to_file=config.get('codecity.logging.to_file', False),
        )

    @classmethod
    def reset(cls):
        """Drop installed handlers so the next `Logger()` applies the current settings."""
        logger = logging.getLogger(_LOGGER_NAME)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        cls._instance = None
        cls._initialized = False

    def __new__(cls):
        """Create or return the singleton instance of Logger.

        Returns:
            The singleton Logger instance.
        """
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """Initialize the logger if not already initialized.

        This method sets up file and console handlers based on configuration.
        A log file is created with timestamp in the filename.
        """
        if Logger._initialized:
            return

        self.logger = logging.getLogger(_LOGGER_NAME)
        if Logger._logging_enabled:
            self.logger.setLevel(logging.DEBUG)

            if Logger._log_to_file:
                if not os.path.exists('logs'):
                    os.makedirs('logs')

                current_time = datetime.now().strftime('%Y%m%d_%H%M%S')
                file_handler = logging.FileHandler(f'logs/codecity_{current_time}.log')
                file_handler.setLevel(logging.DEBUG)
                file_handler.setFormatter(logging.Formatter(_FORMAT))
                self.logger.addHandler(file_handler)

            if Logger._log_to_console:
                console_handler = logging.StreamHandler()
                console_handler.setLevel(logging.INFO)
                console_handler.setFormatter(logging.Formatter(_FORMAT))
                self.logger.addHandler(console_handler)
        else:
            # Null logger when logging is disabled
            self.logger.addHandler(logging.NullHandler())

        Logger._initialized = True

    @staticmethod
    def get_logger(name=None):
        """Get a logger instance, optionally as a child logger with the specified name.

        Args:
            name: Optional name for child logger.

        Returns:
            A configured logger instance.
        """
        logger_instance = Logger()
        if name:
            child_logger = logging.getLogger(f'{_LOGGER_NAME}.{name}')
            child_logger.handlers = []
            child_logger.propagate = Logger._logging_enabled
            if not Logger._logging_enabled:
                child_logger.addHandler(logging.NullHandler())
            return child_logger
        return logger_instance.logger
