"""
Logging configuration for hushrun.

Stdout belongs to the command report, so console logging goes to stderr.
"""

import logging
import os
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler
from typing import Optional, Dict, Any

LOGGER_NAME = "hushrun"


class HushrunLogger:
    """Logger for hushrun."""

    _setup_done = False

    def __init__(self):
        """Initialize the logger."""
        self.logger = logging.getLogger(LOGGER_NAME)

    def setup(
        self,
        verbose: bool = False,
        debug: bool = False,
        log_dir: Optional[str] = None,
    ) -> None:
        """Set up logging handlers.

        Args:
            verbose: Log informational messages to the console
            debug: Enable debug logging
            log_dir: Directory for log files
        """
        if HushrunLogger._setup_done:
            return

        if debug:
            console_level = logging.DEBUG
        elif verbose:
            console_level = logging.INFO
        else:
            console_level = logging.WARNING

        self.logger.setLevel(logging.DEBUG)
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(console_level)
        console_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s \033[0;36m%(levelname)-8s\033[0m %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        self.logger.addHandler(console_handler)

        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
            timestamp = datetime.now().strftime("%Y%m%d-%H%M%S")
            log_file = os.path.join(log_dir, f"hushrun-{timestamp}.log")

            file_handler = RotatingFileHandler(
                log_file,
                maxBytes=10 * 1024 * 1024,  # 10MB
                backupCount=5,
            )
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(
                logging.Formatter(
                    "%(asctime)s [%(levelname)s] %(message)s\n" "%(extra)s\n",
                    datefmt="%Y-%m-%d %H:%M:%S",
                )
            )
            self.logger.addHandler(file_handler)
            self.logger.debug("Log file created at: %s", log_file, extra={"extra": ""})

        # Our handlers are installed, keep records away from the root logger
        self.logger.propagate = False
        HushrunLogger._setup_done = True

    @classmethod
    def reset(cls) -> None:
        """Remove installed handlers so setup() can run again."""
        logger = logging.getLogger(LOGGER_NAME)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        logger.setLevel(logging.NOTSET)
        logger.propagate = True
        cls._setup_done = False

    def get_context_logger(self, **context) -> "ContextLogger":
        """Get a logger with context.

        Args:
            **context: Context key-value pairs

        Returns:
            ContextLogger instance
        """
        return ContextLogger(self.logger, context)


class ContextLogger:
    """Attaches a fixed context, e.g. the calling class, to every record.

    The context ends up in a single ``extra`` attribute, which the log file
    formatter prints below the message.
    """

    def __init__(self, logger: logging.Logger, context: Dict[str, Any]):
        self.logger = logger
        self.context = context

    def _format_context(self, extra: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        context = self.context.copy()
        if extra:
            extra = dict(extra)
            # 'args' is a LogRecord attribute
            if "args" in extra:
                extra["cli_args"] = extra.pop("args")
            context.update(extra)
        context_str = "\n".join(f"{k}: {v}" for k, v in context.items())
        return {"extra": f"Context:\n{context_str}" if context_str else ""}

    def log(
        self,
        level: int,
        msg: str,
        *args,
        extra: Optional[Dict[str, Any]] = None,
        **kwargs,
    ):
        self.logger.log(level, msg, *args, extra=self._format_context(extra), **kwargs)

    def debug(self, msg: str, *args, **kwargs):
        self.log(logging.DEBUG, msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs):
        self.log(logging.INFO, msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs):
        self.log(logging.WARNING, msg, *args, **kwargs)
