from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Currency:
    """
    An amount of money in United States Dollars.

    The API has a generic currency type, but only USD is supported here, so the
    currency tag is not stored.
    """

    amount: float

    @classmethod
    def from_usd(cls, amount: float) -> "Currency":
        """Constructs from a dollar amount, stored as given."""
        return cls(amount)

    def usd(self) -> float:
        """The amount, in USD."""
        return self.amount

    def __repr__(self):
        return f"Currency(usd={self.amount})"
