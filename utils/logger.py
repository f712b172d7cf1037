"""Logging utilities for Chemion glasses designer"""
import os
import logging
from rich.console import Console
from rich.logging import RichHandler
from typing import Optional
from utils.config import Config

LOGGER_NAME = "Chemion"

# Global console instance
_console: Optional[Console] = None

def get_console() -> Console:
    """Get or create global console instance"""
    global _console
    if _console is None:
        _console = Console()
    return _console

def setup_logger(config: Optional[Config] = None) -> logging.Logger:
    """Set up logger with rich handler"""
    # Create logger
    logger = logging.getLogger(LOGGER_NAME)

    if not logger.handlers:  # Only add handlers if none exist
        # Set base level to DEBUG to capture everything
        logger.setLevel(logging.DEBUG)

        # Prevent propagation to root logger
        logger.propagate = False

        # File handler - logs everything with detailed formatting
        if config and config.log_file:
            os.makedirs(os.path.dirname(os.path.abspath(config.log_file)), exist_ok=True)
            mode = 'w' if config.reset_logs else 'a'
            file_formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s'
            )
            file_handler = logging.FileHandler(config.log_file, mode=mode)
            file_handler.setFormatter(file_formatter)
            file_handler.setLevel(logging.DEBUG)  # Log everything to file
            logger.addHandler(file_handler)

        # Console handler with rich formatting
        if config is None or config.console_log:
            console_handler = RichHandler(
                rich_tracebacks=True,
                markup=True,
                show_time=False,  # Time shown in file logs only
                show_path=False,  # Path shown in file logs only
                console=get_console()
            )
            level = config.log_level.upper() if config else logging.INFO
            console_handler.setLevel(level)
            logger.addHandler(console_handler)

    _add_convenience_methods(logger)
    return logger

def _add_convenience_methods(logger: logging.Logger):
    """Attach success/user helpers to the logger instance"""
    if hasattr(logger, "success"):
        return

    def success(self, message: str):
        """Log success message in green"""
        self.info(f"[green]{message}[/green]", extra={"markup": True})

    def user(self, message: str):
        """Log user-friendly message in yellow"""
        self.info(f"[yellow]{message}[/yellow]", extra={"markup": True})

    logger.success = success.__get__(logger)
    logger.user = user.__get__(logger)

def user_guidance(logger: logging.Logger, message: str):
    """Log user guidance messages without duplication"""
    # Console gets formatted
    logger.info(message, extra={"markup": True})

    # If we have file logging enabled, log without markup
    if any(isinstance(h, logging.FileHandler) for h in logger.handlers):
        plain_msg = message
        for color in ("yellow", "green", "red"):
            plain_msg = plain_msg.replace(f"[{color}]", "").replace(f"[/{color}]", "")
        logger.debug(plain_msg, extra={"markup": False})
