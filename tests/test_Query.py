from RelayStJude.classes.gql.Query import build_campaign_query

QUERY = """query get_campaign_by_vanity_and_slug($vanity: String, $slug: String) {
  campaign(vanity: $vanity, slug: $slug) {
    name
    description
    totalAmountRaised { currency value }
    goal { currency value }
    milestones { name amount { currency value } }
  }
}"""


def test_build_campaign_query():
    assert build_campaign_query("@relay-fm", "relay-st-jude-21") == {
        "operationName": "get_campaign_by_vanity_and_slug",
        "variables": {"vanity": "@relay-fm", "slug": "relay-st-jude-21"},
        "query": QUERY,
    }


def test_inputs_are_passed_through():
    query = build_campaign_query("", ' "quoted" \n')
    assert query["variables"] == {"vanity": "", "slug": ' "quoted" \n'}


def test_each_query_is_a_new_dict():
    first = build_campaign_query("@a", "b")
    first["variables"]["vanity"] = "changed"
    second = build_campaign_query("@c", "d")
    assert second["variables"] == {"vanity": "@c", "slug": "d"}
    assert set(second.keys()) == {"operationName", "variables", "query"}
