import abc

from RelayStJude.classes.gql.data.response.Error import ApiError


class CampaignError(abc.ABC, Exception):
    """Abstract base class for everything that can go wrong while fetching a Campaign."""


class TransportFailed(CampaignError):
    """Raised when the HTTP request could not be made or returned a non-2xx status."""

    def __init__(self, url: str, reason: str):
        self.url = url
        """The URL that was requested."""
        self.reason = reason
        """What went wrong."""

    def __str__(self):
        return f"Request to {self.url} failed: {self.reason}"


class MalformedResponse(CampaignError):
    """Raised when a response is not JSON or has an unexpected shape."""

    def __init__(self, path: list[str | int], message: str):
        self.path = path
        """The path in the JSON to the unexpected value, innermost first."""
        self.message = message
        """Information about the unexpected value."""

    def __str__(self):
        def render_path_item(item: int | str) -> str:
            if isinstance(item, int):
                return str(item)
            else:
                return f'"{item}"'

        return f'JSON at [{", ".join(map(render_path_item, reversed(self.path)))}] has an invalid shape: {self.message}'


class MalformedAmount(MalformedResponse):
    """Raised when a currency `value` string is not a finite decimal number."""

    def __init__(self, path: list[str | int], text: str):
        super().__init__(path, f"'{text}' is not a finite decimal amount")
        self.text = text
        """The raw text that failed to parse."""


class RemoteError(CampaignError):
    """Raised when the API answered with errors instead of data."""

    def __init__(self, errors: list[ApiError]):
        self.errors = errors
        """The errors in the order the API reported them."""

    def __str__(self):
        return "Campaign Query failed:\n" + "\n".join(str(error) for error in self.errors)


class EmptyResponse(CampaignError):
    """Raised when a response carried neither data nor errors."""

    def __str__(self):
        return "Campaign Query returned neither data nor errors"
