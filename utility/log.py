import logging
import logging.handlers
import os
import re
from copy import deepcopy

LOG_FORMAT = (
    "%(asctime)s - %(name)s - %(module)s:%(lineno)d - %(levelname)s - %(message)s"
)


class Log(logging.Logger):
    """bigip logger object to help streamline logging."""

    def __init__(self, name=None) -> None:
        """
        Initializes the logging mechanism.
        Args:
            name (str): Logger name (module name or other identifier).
        """
        super().__init__(name)
        logging.basicConfig(format=LOG_FORMAT, level=logging.INFO)
        self._logger = logging.getLogger("bigip")

        # Set logger name
        if name:
            self.name = f"bigip.{name}"

        self._log_dir = None
        self.log_format = LOG_FORMAT
        self._log_errors = []
        self.info = self._logger.info
        self.debug = self._logger.debug
        self.warning = self._logger.warning
        self.error = self._logger.error
        self.exception = self._logger.exception

    @property
    def log_dir(self) -> str:
        """Return the absolute path to the logging folder."""
        return self._log_dir

    @property
    def log_level(self) -> int:
        """Return the logging level."""
        return self._logger.getEffectiveLevel()

    @property
    def logger(self) -> logging.Logger:
        """Return the logger."""
        return self._logger

    @property
    def errors(self) -> list:
        """Return the errors tracked through log_error."""
        return self._log_errors

    def set_level(self, level) -> None:
        """Set the level of the shared bigip logger.

        Args:
            level (str|int): Level name (e.g. "DEBUG") or numeric level.
        """
        if isinstance(level, str):
            level = level.upper()
        self._logger.setLevel(level)

    def log_error(self, message: str) -> None:
        """Logs an error and appends it to the internal error tracker.

        Args:
            message (str): The error message to log and track.
        """
        self._log_errors.append(message)
        self.error(message)

    def configure_logger(self, log_name, log_dir, disable_console_log, **kwargs):
        """Configures file handlers for the bigip logger.

        Args:
            log_name: name used for the logfile
            log_dir: directory where logs are being placed
            disable_console_log: stop propagating records to the root logger
        Returns:
            Path of the log file or None if the log_dir does not exist
        """
        if not os.path.isdir(log_dir):
            self._logger.error(
                f"Log directory '{log_dir}' does not exist, logs will not output to file."
            )
            return None

        self.close_and_remove_filehandlers()
        self._log_dir = log_dir
        pass_filter = SensitiveLogFilter(name="bigip_filter")

        log_format = logging.Formatter(self.log_format)
        logfile = os.path.join(log_dir, f"{log_name}.log")
        self._logger.info(f"Logfile: {logfile}")

        if disable_console_log:
            self._logger.propagate = False

        _handler = logging.handlers.RotatingFileHandler(
            logfile,
            maxBytes=kwargs.get("max_bytes", 10 * 1024 * 1024),
            backupCount=kwargs.get("backup_count", 20),
        )
        _handler.setFormatter(log_format)
        _handler.addFilter(pass_filter)
        self._logger.addHandler(_handler)

        # error file handler
        err_logfile = os.path.join(log_dir, f"{log_name}.err")
        _err_handler = logging.FileHandler(err_logfile)
        _err_handler.setFormatter(log_format)
        _err_handler.setLevel(logging.ERROR)
        _err_handler.addFilter(pass_filter)
        self._logger.addHandler(_err_handler)

        if not disable_console_log:
            console_handler = logging.StreamHandler()
            console_handler.setLevel(logging.INFO)
            console_handler.setFormatter(log_format)
            console_handler.addFilter(pass_filter)
            if not any(
                type(h) is logging.StreamHandler for h in self._logger.handlers
            ):
                self._logger.addHandler(console_handler)

        self._logger.debug("Completed log configuration")
        return logfile

    def close_and_remove_filehandlers(self):
        """Close FileHandlers and then remove them from the logger's handlers list."""
        handlers = self._logger.handlers[:]
        for handler in handlers:
            if isinstance(handler, logging.FileHandler):
                handler.close()
                self._logger.removeHandler(handler)


class SensitiveLogFilter(logging.Filter):
    """Filter known sensitive data from being logged."""

    excluded_words = [
        "access-key",
        "access_key",
        "password",
        "passwd",
        "token",
    ]

    def redact_list(self, data):
        """Redact values in the iterator."""
        for i, v in enumerate(data):
            if isinstance(v, list):
                self.redact_list(data[i])
            elif isinstance(v, dict):
                self.redact_dict(data[i])
            elif isinstance(v, tuple):
                data[i] = self.redact(v)
            elif isinstance(v, (str, bytearray, bytes)):
                data[i] = self.redact_str(v)

    def redact_dict(self, data):
        """Redact values based on keys"""
        for _key in data.keys():
            if _key in self.excluded_words:
                data[_key] = "<masked>"
            elif isinstance(data[_key], dict):
                self.redact_dict(data[_key])
            elif isinstance(data[_key], list):
                self.redact_list(data[_key])
            elif isinstance(data[_key], tuple):
                data[_key] = self.redact(data[_key])
            elif isinstance(data[_key], (str, bytearray, bytes)):
                data[_key] = self.redact_str(data[_key])

    def redact_str(self, data):
        """Redact strings containing sensitive keys."""
        if not isinstance(data, str):
            data = str(data, "utf-8")
        _words = "|".join(self.excluded_words)
        return re.sub(
            rf'({_words})\s*[:=]?\s*(["\']?)([^\s"\']+)(\2)(\s|$)',
            r"\1 <masked>\5",
            data,
            flags=re.IGNORECASE,
        )

    def redact(self, msg):
        """Return the redacted message if sensitive data found.

        Strings are scanned for values following a known word, dicts are
        scanned by key.
        """
        data = deepcopy(msg)

        if isinstance(data, dict):
            self.redact_dict(data)
            return data

        if isinstance(data, list):
            self.redact_list(data)
            return data

        if isinstance(data, tuple):
            return tuple(self.redact(arg) for arg in data)

        if isinstance(data, (str, bytearray, bytes)):
            return self.redact_str(data)

        # Basic types that require no processing
        return data

    def filter(self, record):
        """Modifies the log record.

        The device credentials travel through the REST layer, so the word
        following password or token is masked before it reaches a handler.
        """
        record.msg = self.redact(record.msg)
        if isinstance(record.args, dict):
            for k in record.args.keys():
                record.args[k] = self.redact(record.args[k])
        elif record.args:
            record.args = tuple(self.redact(arg) for arg in record.args)

        return True
