from dataclasses import dataclass, field

from RelayStJude.classes.entities.Currency import Currency
from RelayStJude.classes.entities.Milestone import Milestone


@dataclass(frozen=True)
class Campaign:
    """A fund-raising campaign as returned by the Tiltify API."""

    name: str
    """Display title of the campaign."""
    description: str
    """Long-form description of what the campaign is for."""
    goal: Currency
    """The amount the campaign is trying to raise."""
    total_amount_raised: Currency
    """The amount raised so far."""
    milestones: tuple[Milestone, ...] = field(default=())
    """Milestones in the order the API returned them."""

    def __post_init__(self):
        # Accept any iterable but always store a tuple
        object.__setattr__(self, "milestones", tuple(self.milestones))
