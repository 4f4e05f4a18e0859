import logging

from colorama import Fore, Style

ROOT_LOGGER = "RelayStJude"
DEFAULT_LEVEL = logging.WARNING


class ColorPalette(object):
    DEBUG = Fore.CYAN
    INFO = Fore.RESET
    WARNING = Fore.YELLOW
    ERROR = Fore.RED
    CRITICAL = Fore.RED + Style.BRIGHT

    @classmethod
    def get(cls, levelname: str) -> str:
        return getattr(cls, levelname, Fore.RESET)


class ColoredFormatter(logging.Formatter):
    def __init__(self, fmt: str, datefmt: str, color: bool = True):
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.color = color

    def format(self, record):
        message = super().format(record)
        if self.color is True:
            return f"{ColorPalette.get(record.levelname)}{message}{Style.RESET_ALL}"
        return message


def parse_level(value: str) -> int:
    level = logging.getLevelName(value.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level '{value.strip()}'")
    return level


def parse_log_filter(log_filter: str | None) -> dict[str, int]:
    """
    Parses a filter like "info,RelayStJude.classes.gql=debug" into logger names and levels.
    A bare level applies to the package's root logger.
    """
    levels = {ROOT_LOGGER: DEFAULT_LEVEL}
    if log_filter is None:
        return levels
    for entry in log_filter.split(","):
        entry = entry.strip()
        if entry == "":
            continue
        if "=" in entry:
            name, level = entry.split("=", 1)
            levels[name.strip()] = parse_level(level)
        else:
            levels[ROOT_LOGGER] = parse_level(entry)
    return levels


def configure_loggers(log_filter: str | None = None, color: bool = True) -> logging.Logger:
    """
    Sends the package's log records to stderr, with levels taken from the filter.
    :raises ValueError: if the filter names an unknown level.
    """
    levels = parse_log_filter(log_filter)

    logger = logging.getLogger(ROOT_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    _handler = logging.StreamHandler()
    _handler.setFormatter(
        ColoredFormatter(
            "%(asctime)s - %(levelname)s - %(module)s - [%(funcName)s]: %(message)s",
            datefmt="%d/%m/%y %H:%M:%S",
            color=color,
        )
    )
    logger.addHandler(_handler)
    logger.propagate = False

    for name, level in levels.items():
        named_logger = logging.getLogger(name)
        named_logger.setLevel(level)
        if name != ROOT_LOGGER and not name.startswith(f"{ROOT_LOGGER}."):
            # Libraries such as urllib3 need their own handler
            for handler in list(named_logger.handlers):
                if isinstance(handler.formatter, ColoredFormatter):
                    named_logger.removeHandler(handler)
            named_logger.addHandler(_handler)
            named_logger.propagate = False
    return logger
