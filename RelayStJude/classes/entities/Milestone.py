from dataclasses import dataclass

from RelayStJude.classes.entities.Currency import Currency


@dataclass(frozen=True)
class Milestone:
    """A fund-raising checkpoint; the description says what happens once it is reached."""

    description: str
    amount: Currency

    def is_reached(self, raised: Currency) -> bool:
        # Reaching the amount exactly still counts as pending
        return self.amount < raised
