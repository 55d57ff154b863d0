"""Client-input errors raised while resolving a café query.

Each error carries the exact plain-text message returned to the client
with HTTP 400.
"""


class CafeQueryError(Exception):
    """Base class for rejected café queries."""

    message = "bad request"

    def __init__(self, value: str | None = None) -> None:
        super().__init__(self.message)
        self.value = value


class UnknownCityError(CafeQueryError):
    """The city parameter is missing or not in the dataset."""

    message = "unknown city"


class InvalidCountError(CafeQueryError):
    """The count parameter is not a non-negative integer."""

    message = "incorrect count"
