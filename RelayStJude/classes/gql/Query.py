import copy

from RelayStJude.constants import GQLOperations


def build_campaign_query(vanity: str, slug: str) -> dict:
    """
    Builds the request body for looking up a campaign.
    :param vanity: The user or team namespace, e.g. "@relay-fm".
    :param slug: The campaign's identifier within the vanity.
    :return: A new dict with `operationName`, `variables` and `query`.
    """
    json_data = copy.deepcopy(GQLOperations.GetCampaignByVanityAndSlug)
    json_data["variables"] = {"vanity": vanity, "slug": slug}
    return json_data
