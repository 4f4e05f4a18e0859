import argparse
import logging
import sys
import traceback

from RelayStJude.classes.Presenter import Presenter
from RelayStJude.classes.Settings import Settings
from RelayStJude.classes.gql.Errors import CampaignError
from RelayStJude.classes.gql.Integration import CampaignFetcher
from RelayStJude.constants import DEFAULT_SLUG, DEFAULT_VANITY
from RelayStJude.logger import configure_loggers

logger = logging.getLogger(__name__)


def build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="relay-st-jude",
        description="Show the progress of a Tiltify fund-raising campaign and its milestones.",
    )
    parser.add_argument("vanity", nargs="?", default=DEFAULT_VANITY, help=f"default: {DEFAULT_VANITY}")
    parser.add_argument("slug", nargs="?", default=DEFAULT_SLUG, help=f"default: {DEFAULT_SLUG}")
    parser.add_argument(
        "--json",
        action="store_true",
        help="print the raw API response instead of the summary",
    )
    return parser


def report_error(error: BaseException, backtrace: bool, err=None):
    """Prints the error and everything that caused it."""
    err = err if err is not None else sys.stderr
    if backtrace is True:
        traceback.print_exception(error, file=err)
        return
    print(f"Error: {error}", file=err)
    cause = error.__cause__
    while cause is not None:
        print(f"Caused by: {cause}", file=err)
        cause = cause.__cause__


def main(argv: list[str] | None = None, fetcher: CampaignFetcher | None = None) -> int:
    args = build_argument_parser().parse_args(argv)

    try:
        settings = Settings.from_env()
        configure_loggers(settings.log_filter, color=sys.stderr.isatty())
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if fetcher is None:
        fetcher = CampaignFetcher(timeout=settings.timeout)

    try:
        if args.json is True:
            print(fetcher.fetch_json(args.vanity, args.slug))
        else:
            campaign = fetcher.fetch_by(args.vanity, args.slug)
            logger.info(f"Fetched {campaign.name} with {len(campaign.milestones)} milestone(s)")
            Presenter(color=sys.stdout.isatty()).print(campaign)
    except CampaignError as e:
        report_error(e, settings.backtrace)
        return 1
    return 0


def run():
    sys.exit(main())
