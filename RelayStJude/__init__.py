from RelayStJude.classes.entities.Campaign import Campaign
from RelayStJude.classes.entities.Currency import Currency
from RelayStJude.classes.entities.Milestone import Milestone
from RelayStJude.classes.gql.Errors import (
    CampaignError,
    EmptyResponse,
    MalformedAmount,
    MalformedResponse,
    RemoteError,
    TransportFailed,
)
from RelayStJude.classes.gql.Integration import (
    CampaignFetcher,
    fetch_campaign,
    fetch_campaign_by,
    fetch_campaign_json,
)
