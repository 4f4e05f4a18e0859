import json
import logging
import math
import re
from typing import Callable, Any, ContextManager, TypeVar

from RelayStJude.classes.entities.Campaign import Campaign
from RelayStJude.classes.entities.Currency import Currency
from RelayStJude.classes.entities.Milestone import Milestone
from RelayStJude.classes.gql.Errors import (
    EmptyResponse,
    MalformedAmount,
    MalformedResponse,
)
from RelayStJude.classes.gql.data.response.Envelope import (
    DataEnvelope,
    Envelope,
    ErrorsEnvelope,
)
from RelayStJude.classes.gql.data.response.Error import ApiError, Location

T = TypeVar("T")

logger = logging.getLogger(__name__)

DECIMAL_PATTERN = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


class JsonParentContext(ContextManager):
    """Context Manager that appends the parent name to MalformedResponse paths"""

    def __init__(self, name: str | int):
        self.name = name

    def __exit__(self, exc_type, exc_val, exc_tb):
        if isinstance(exc_val, MalformedResponse):
            exc_val.path.append(self.name)


def expect_dict(value: Any) -> dict:
    """
    Parser that checks that the value is a dict then returns it.
    :raises MalformedResponse: if the value is not a dict
    """
    if not isinstance(value, dict):
        raise MalformedResponse([], "dict expected")
    return value


def expect_list(value: Any) -> list:
    """
    Parser that checks that the value is a list then returns it.
    :raises MalformedResponse: if the value is not a list.
    """
    if not isinstance(value, list):
        raise MalformedResponse([], "list expected")
    return value


def expect_str(value: Any) -> str:
    """
    Parser that checks that the value is a string then returns it.
    :raises MalformedResponse: if the value is not a string.
    """
    if not isinstance(value, str):
        raise MalformedResponse([], "str expected")
    return value


def expect_int(value: Any) -> int:
    """
    Parser that checks that the value is an int then returns it.
    :raises MalformedResponse: if the value is not an int.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedResponse([], "int expected")
    return value


def expect_decimal_str(value: Any) -> float:
    """
    Parser for amounts that the API encodes as decimal strings, e.g. "333333.33".
    :raises MalformedResponse: if the value is not a string.
    :raises MalformedAmount: if the string is not a finite number.
    """
    text = expect_str(value)
    if DECIMAL_PATTERN.fullmatch(text) is None:
        raise MalformedAmount([], text)
    amount = float(text)
    # Exponents can still overflow to infinity
    if not math.isfinite(amount):
        raise MalformedAmount([], text)
    return amount


def parse_expected_value(
    source: dict, property_name: str, type_parser: Callable[[Any], T]
) -> T:
    """
    Parses a value, with the given property name, in the given dict, and parses it using the given parser.
    :param source: The parent object, containing the value to parse.
    :param property_name: The property name of the value to parse.
    :param type_parser: A parser for the type of the value.
    :return: The parsed value.
    :raises MalformedResponse: if the property is not in the dict or the value cannot be parsed.
    """
    if property_name not in source:
        raise MalformedResponse([property_name], "value should not be None")
    with JsonParentContext(property_name):
        return type_parser(source[property_name])


def parse_value(
    source: dict,
    property_name: str,
    type_parser: Callable[[Any], T],
    default: T | None = None,
) -> T | None:
    """
    Parses a value, with the given property name, in the given dict, and parses it using the given parser. The property
    may not exist in the source, in which case we return the default value.
    :param source: The parent object, containing the value to parse.
    :param property_name: The property name of the value to parse.
    :param type_parser: A parser for the type of the value.
    :param default: The default value to return if the value cannot be found (defaults to None).
    :return: The parsed value or the default if the property cannot be found.
    """
    if property_name not in source:
        return default
    with JsonParentContext(property_name):
        return type_parser(source[property_name])


def list_parser(value_type_parser: Callable[[Any], T]) -> Callable[[Any], list[T]]:
    """
    Returns a parser function that parses a value as a list and each item in the list using the given parser.
    :param value_type_parser: The parser for each value in the list.
    :return: The list parser function.
    """

    def inner_parser(source: Any) -> list[T]:
        expect_list(source)

        result = []
        for index, item in enumerate(source):
            with JsonParentContext(index):
                result.append(value_type_parser(item))
        return result

    return inner_parser


def optional_parser(
    value_type_parser: Callable[[Any], T],
) -> Callable[[Any], T | None]:
    """
    Returns a parser function that parses a value as either None or using the given parser.
    :param value_type_parser: The parser for the type of the value.
    :return: The parser function.
    """

    def inner_parser(value: Any) -> T | None:
        if value is None:
            return None
        else:
            return value_type_parser(value)

    return inner_parser


# Parsers for the campaign query response types


def currency_parser(value: Any) -> Currency:
    expect_dict(value)
    currency = parse_value(value, "currency", optional_parser(expect_str))
    if currency is not None and currency != "USD":
        logger.warning(f"Got an amount in {currency}, treating it as USD")
    return Currency.from_usd(parse_expected_value(value, "value", expect_decimal_str))


def milestone_parser(value: Any) -> Milestone:
    expect_dict(value)
    return Milestone(
        description=parse_expected_value(value, "name", expect_str),
        amount=parse_expected_value(value, "amount", currency_parser),
    )


def campaign_parser(value: Any) -> Campaign:
    expect_dict(value)
    return Campaign(
        name=parse_expected_value(value, "name", expect_str),
        description=parse_expected_value(value, "description", expect_str),
        goal=parse_expected_value(value, "goal", currency_parser),
        total_amount_raised=parse_expected_value(
            value, "totalAmountRaised", currency_parser
        ),
        # A null list is as good as a missing one
        milestones=parse_value(
            value, "milestones", optional_parser(list_parser(milestone_parser))
        )
        or [],
    )


def location_parser(value: Any) -> Location:
    expect_dict(value)
    return Location(
        line=parse_expected_value(value, "line", expect_int),
        column=parse_expected_value(value, "column", expect_int),
    )


def path_item_parser(value: Any) -> str | int:
    if isinstance(value, str):
        return value
    return expect_int(value)


def error_parser(value: Any) -> ApiError:
    expect_dict(value)
    return ApiError(
        message=parse_expected_value(value, "message", expect_str),
        locations=parse_value(
            value, "locations", optional_parser(list_parser(location_parser))
        ),
        path=parse_value(value, "path", optional_parser(list_parser(path_item_parser))),
    )


def data_parser(value: Any) -> Campaign | None:
    expect_dict(value)
    return parse_value(value, "campaign", optional_parser(campaign_parser))


def envelope_parser(value: Any) -> Envelope:
    """
    Parses the top level of a response into either a DataEnvelope or an ErrorsEnvelope.
    :raises MalformedResponse: if the response has an unexpected shape.
    :raises EmptyResponse: if there is neither a campaign nor any errors.
    """
    expect_dict(value)
    campaign = parse_value(value, "data", optional_parser(data_parser))
    errors = (
        parse_value(value, "errors", optional_parser(list_parser(error_parser))) or []
    )
    if campaign is not None:
        return DataEnvelope(campaign, errors)
    if len(errors) > 0:
        return ErrorsEnvelope(errors)
    raise EmptyResponse()


class Parser:
    """Class that can parse responses from the Tiltify GQL API."""

    def parse_envelope(self, text: str) -> Envelope:
        """
        Parses the body of a response into an Envelope.
        :param text: The response body.
        :return: The parsed envelope.
        :raises MalformedResponse: If the body is not JSON or has an unexpected shape.
        :raises EmptyResponse: If the body has neither data nor errors.
        """
        try:
            response = json.loads(text)
        except ValueError as e:
            raise MalformedResponse([], f"not valid JSON ({e})") from e
        return envelope_parser(response)

    def parse_campaign_response(self, text: str) -> Campaign:
        """
        Parses the body of a get_campaign_by_vanity_and_slug response.
        :param text: The response body.
        :return: The Campaign.
        :raises CampaignError: If the body cannot be parsed or the API reported errors.
        """
        return self.parse_envelope(text).campaign()
