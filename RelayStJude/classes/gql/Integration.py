import logging

import requests

from RelayStJude.classes.entities.Campaign import Campaign
from RelayStJude.classes.gql.Errors import TransportFailed
from RelayStJude.classes.gql.Query import build_campaign_query
from RelayStJude.classes.gql.data.Parser import Parser
from RelayStJude.constants import (
    DEFAULT_SLUG,
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_VANITY,
    GQLOperations,
    HEADERS,
)

logger = logging.getLogger(__name__)


class CampaignFetcher:
    """
    Integration with Tiltify's Graph Query Language (GQL) API.
    """

    def __init__(
        self,
        parser: Parser | None = None,
        post_request=requests.post,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ):
        self.parser = parser if parser is not None else Parser()
        """The parser for parsing GQL responses."""
        self.post_request = post_request
        """Function for posting GQL requests."""
        self.timeout = timeout
        """Seconds to wait for the API before giving up."""

    def fetch(self) -> Campaign:
        """
        Fetches the Relay FM for St. Jude campaign.
        :return: The campaign.
        :raises CampaignError: If the request failed or the response could not be used.
        """
        return self.fetch_by(DEFAULT_VANITY, DEFAULT_SLUG)

    def fetch_by(self, vanity: str, slug: str) -> Campaign:
        """
        Fetches the campaign with the given vanity and slug.
        :param vanity: The user or team namespace of the campaign.
        :param slug: The identifier of the campaign.
        :return: The campaign.
        :raises CampaignError: If the request failed or the response could not be used.
        """
        return self.parser.parse_campaign_response(self.fetch_json(vanity, slug))

    def fetch_json(self, vanity: str, slug: str) -> str:
        """
        Fetches the raw response body for the campaign with the given vanity and slug. Useful when the response does
        not decode.
        :param vanity: The user or team namespace of the campaign.
        :param slug: The identifier of the campaign.
        :return: The response body, undecoded.
        :raises TransportFailed: If the request could not be made or returned a non-2xx status.
        """
        request_json = build_campaign_query(vanity, slug)
        try:
            response = self.post_request(
                GQLOperations.url,
                json=request_json,
                headers=HEADERS,
                timeout=self.timeout,
            )
            logger.debug(
                f"Data: {request_json['variables']}, Status code: {response.status_code}, Content: {response.text}"
            )
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            raise TransportFailed(GQLOperations.url, str(e)) from e
        return response.text


def fetch_campaign() -> Campaign:
    """Fetches the Relay FM for St. Jude campaign with a default CampaignFetcher."""
    return CampaignFetcher().fetch()


def fetch_campaign_by(vanity: str, slug: str) -> Campaign:
    """Fetches an arbitrary campaign with a default CampaignFetcher."""
    return CampaignFetcher().fetch_by(vanity, slug)


def fetch_campaign_json(vanity: str, slug: str) -> str:
    """Fetches the raw response body for a campaign with a default CampaignFetcher."""
    return CampaignFetcher().fetch_json(vanity, slug)
