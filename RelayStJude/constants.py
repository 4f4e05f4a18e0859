from textwrap import dedent

API_URL = "https://api.tiltify.com"

DEFAULT_VANITY = "@relay-fm"
DEFAULT_SLUG = "relay-st-jude-21"

DEFAULT_TIMEOUT_SECONDS = 30

HEADERS = {
    "Accept": "application/json",
    "Content-Type": "application/json",
}


class GQLOperations:
    url = API_URL
    GetCampaignByVanityAndSlug = {
        "operationName": "get_campaign_by_vanity_and_slug",
        "variables": {},
        "query": dedent(
            """\
            query get_campaign_by_vanity_and_slug($vanity: String, $slug: String) {
              campaign(vanity: $vanity, slug: $slug) {
                name
                description
                totalAmountRaised { currency value }
                goal { currency value }
                milestones { name amount { currency value } }
              }
            }"""
        ),
    }
