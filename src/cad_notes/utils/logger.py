import inspect
import logging
import os

from pythonjsonlogger import jsonlogger

SERVICE_NAME = "cad-notes"

LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

# Keyword arguments the stdlib logger understands; anything else is a field.
_LOGGING_KWARGS = ("exc_info", "stack_info", "stacklevel")


def _caller_location() -> str:
    # Two frames up: the adapter method, then whoever called it.
    frame = inspect.currentframe()
    caller = frame.f_back.f_back if frame and frame.f_back else None
    if caller is None:
        return "unknown:0"
    return f"{caller.f_code.co_filename}:{caller.f_lineno}"


def _build_handler() -> logging.Handler:
    formatter = jsonlogger.JsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s",
        rename_fields={"asctime": "@timestamp", "levelname": "log_level"},
        static_fields={"service": SERVICE_NAME},
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    return handler


class Logger(logging.LoggerAdapter):
    """Process-wide structured logger.

    Keyword arguments passed to any log call are emitted as JSON fields:

        logger.info("Generated CAD notes", material=material, model=model)
    """

    _instance = None
    _initialized = False

    def __new__(cls) -> "Logger":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self) -> None:
        if Logger._initialized:
            return

        level_name = os.getenv("LOG_LEVEL", "INFO").upper()

        base = logging.getLogger("cad_notes")
        base.setLevel(LOG_LEVELS.get(level_name, logging.INFO))
        base.addHandler(_build_handler())
        base.propagate = False

        super().__init__(base)
        Logger._initialized = True

    def error(self, msg: str, *args: tuple, **kwargs: dict) -> None:
        """Log at ERROR level, tagging the record with the caller's file and line."""
        kwargs["file"] = _caller_location()
        self.log(logging.ERROR, msg, *args, **kwargs)

    def exception(
        self, msg: str, *args: tuple, exc_info: bool = True, **kwargs: dict
    ) -> None:
        """Log at ERROR level with traceback and the caller's file and line."""
        kwargs["file"] = _caller_location()
        self.log(logging.ERROR, msg, *args, exc_info=exc_info, **kwargs)

    def process(self, msg: str, kwargs: dict) -> tuple[str, dict]:
        passthrough = {}
        for key in _LOGGING_KWARGS:
            value = kwargs.pop(key, None)
            if value is not None:
                passthrough[key] = value
        if kwargs:
            passthrough["extra"] = kwargs
        return msg, passthrough


logger = Logger()
logger.debug(
    f"Logging level set to {logging.getLevelName(logger.logger.getEffectiveLevel())}"
)
