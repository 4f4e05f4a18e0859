import abc
import logging

from RelayStJude.classes.entities.Campaign import Campaign
from RelayStJude.classes.gql.Errors import RemoteError
from RelayStJude.classes.gql.data.response.Error import ApiError

logger = logging.getLogger(__name__)


class Envelope(abc.ABC):
    """The top level of a GQL response: either data or a list of errors."""

    def __init__(self, errors: list[ApiError]):
        self.errors = errors
        """Errors reported by the API, in the order they were received."""

    @abc.abstractmethod
    def campaign(self) -> Campaign:
        """
        Gets the Campaign carried by this response.
        :raises RemoteError: if the API reported errors instead.
        """
        pass


class DataEnvelope(Envelope):
    """A response that carries a Campaign, possibly alongside errors."""

    def __init__(self, campaign: Campaign, errors: list[ApiError] | None = None):
        super().__init__(errors if errors is not None else [])
        self._campaign = campaign

    def campaign(self) -> Campaign:
        if len(self.errors) > 0:
            logger.warning(
                f"Campaign Query returned data with {len(self.errors)} error(s): "
                + "; ".join(str(error) for error in self.errors)
            )
        return self._campaign

    def __repr__(self):
        return f"DataEnvelope(campaign={self._campaign!r}, errors={self.errors!r})"

    def __eq__(self, other):
        return (
            isinstance(other, DataEnvelope)
            and self._campaign == other._campaign
            and self.errors == other.errors
        )


class ErrorsEnvelope(Envelope):
    """A response that carries at least one error and no Campaign."""

    def __init__(self, errors: list[ApiError]):
        if len(errors) == 0:
            raise ValueError("ErrorsEnvelope needs at least one error")
        super().__init__(errors)

    def campaign(self) -> Campaign:
        raise RemoteError(self.errors)

    def __repr__(self):
        return f"ErrorsEnvelope(errors={self.errors!r})"

    def __eq__(self, other):
        return isinstance(other, ErrorsEnvelope) and self.errors == other.errors
