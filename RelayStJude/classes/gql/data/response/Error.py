class Location:
    """A 1-based position in the query text that an error refers to."""

    def __init__(self, line: int, column: int):
        self.line = line
        self.column = column

    def __repr__(self):
        return f"Location({self.__dict__})"

    def __eq__(self, other):
        return (
            isinstance(other, Location)
            and self.line == other.line
            and self.column == other.column
        )


class ApiError:
    def __init__(
        self,
        message: str,
        locations: list[Location] | None = None,
        path: list[str | int] | None = None,
    ):
        self.message = message
        self.locations = locations if locations is not None else []
        self.path = path

    def __repr__(self):
        return f"ApiError({self.__dict__})"

    def __str__(self):
        if len(self.locations) == 0:
            return f"~ {self.message}"
        location = self.locations[0]
        return f"~:{location.line}:{location.column} {self.message}"

    def __eq__(self, other):
        return (
            isinstance(other, ApiError)
            and self.message == other.message
            and self.locations == other.locations
            and self.path == other.path
        )
