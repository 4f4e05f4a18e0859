import math

from RelayStJude.classes.entities.Currency import Currency
from RelayStJude.classes.entities.Milestone import Milestone


def format_usd(amount: Currency) -> str:
    """
    Formats an amount the usual way for dollars, e.g. "$22,663.40".
    The dollars are truncated and the cents are nudged by half a cent before flooring. Negative and NaN amounts
    are read as unsigned and show as "$0.00".
    """
    usd = amount.usd()
    if math.isnan(usd) or usd < 0:
        usd = 0.0
    fraction, whole = math.modf(usd)
    dollars = int(whole)
    cents = math.floor(100 * fraction + 0.005)
    if cents >= 100:
        dollars += 1
        cents -= 100
    return f"${dollars:,}.{cents:02}"


def milestone_sort_key(milestone: Milestone) -> int:
    # Whole cents as an unsigned integer: negative and NaN amounts sort first
    amount = 100 * milestone.amount.usd()
    if math.isnan(amount) or amount <= 0:
        return 0
    return int(amount)


def percentage(raised: Currency, threshold: Currency) -> str:
    if threshold.usd() == 0:
        return "100.0%"
    return f"{100 * raised.usd() / threshold.usd():.1f}%"
