import os

from dotenv import find_dotenv, load_dotenv

from RelayStJude.constants import DEFAULT_TIMEOUT_SECONDS

BACKTRACE_ENV = "RELAY_ST_JUDE_BACKTRACE"
LOG_ENV = "RELAY_ST_JUDE_LOG"
TIMEOUT_ENV = "RELAY_ST_JUDE_TIMEOUT"

TRUTHY = ["1", "true", "yes", "on", "full"]


class Settings(object):
    __slots__ = ["backtrace", "log_filter", "timeout"]

    def __init__(
        self,
        backtrace: bool = False,
        log_filter: str | None = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ):
        self.backtrace = backtrace
        self.log_filter = log_filter
        self.timeout = timeout

    def __repr__(self):
        return f"Settings(backtrace={self.backtrace}, log_filter={self.log_filter}, timeout={self.timeout})"

    @classmethod
    def from_env(cls, environ=None, dotenv: bool = True) -> "Settings":
        """
        Reads the settings from the environment, after loading a .env file if there is one.
        :raises ValueError: if the timeout is not a positive number.
        """
        if dotenv is True:
            load_dotenv(find_dotenv(usecwd=True))
        if environ is None:
            environ = os.environ

        timeout = DEFAULT_TIMEOUT_SECONDS
        raw_timeout = environ.get(TIMEOUT_ENV)
        if raw_timeout:
            timeout = float(raw_timeout)
            if not timeout > 0:
                raise ValueError(f"{TIMEOUT_ENV} must be a positive number of seconds, got '{raw_timeout}'")

        return cls(
            backtrace=environ.get(BACKTRACE_ENV, "").strip().lower() in TRUTHY,
            log_filter=environ.get(LOG_ENV) or None,
            timeout=timeout,
        )
