import sys
from typing import TextIO

from colorama import Fore, Style

from RelayStJude.classes.entities.Campaign import Campaign
from RelayStJude.classes.entities.Milestone import Milestone
from RelayStJude.utils import format_usd, milestone_sort_key, percentage

INDENT = " " * 4
REACHED = "✅"
PENDING = "🤞"
# Widest percentage a pending milestone shows while amounts are non-negative is "100.0%",
# wider values only push the line right
PERCENTAGE_WIDTH = 6


class Presenter:
    """Renders a Campaign as lines of text."""

    def __init__(self, color: bool = False, out: TextIO | None = None):
        self.color = color
        """Whether to colour reached and pending milestones."""
        self.out = out
        """Where `print` writes to, defaults to the current stdout."""

    @staticmethod
    def sorted_milestones(campaign: Campaign) -> list[Milestone]:
        return sorted(campaign.milestones, key=milestone_sort_key)

    def render(self, campaign: Campaign) -> list[str]:
        raised = campaign.total_amount_raised
        lines = [
            f"{campaign.name}!",
            f"{format_usd(raised)} of {format_usd(campaign.goal)}",
        ]

        milestones = self.sorted_milestones(campaign)
        width = max((len(format_usd(m.amount)) for m in milestones), default=0)
        for milestone in milestones:
            if milestone.is_reached(raised):
                marker = f"{REACHED} {'':>{PERCENTAGE_WIDTH}}"
                color = Fore.GREEN
            else:
                marker = f"{PENDING} {percentage(raised, milestone.amount):>{PERCENTAGE_WIDTH}}"
                color = Fore.YELLOW
            line = f"{INDENT}{marker} {format_usd(milestone.amount):>{width}} - {milestone.description}"
            if self.color:
                line = f"{color}{line}{Style.RESET_ALL}"
            lines.append(line)
        return lines

    def print(self, campaign: Campaign):
        out = self.out if self.out is not None else sys.stdout
        for line in self.render(campaign):
            print(line, file=out)
