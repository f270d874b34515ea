"""Application exception hierarchy."""

# Default user-facing messages
_DEFAULT_USER_MSG = "Something went wrong"
_INVALID_PAYLOAD_MSG = "Invalid request data"
_UNSUPPORTED_CURRENCY_MSG = "Unsupported currency"


class AppError(Exception):
    """Base exception for all application errors.

    ``status`` is the HTTP status the API layer answers with.
    """

    status = 500

    def __init__(
        self,
        message: str = "Internal error",
        user_message: str = _DEFAULT_USER_MSG,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.user_message = user_message

    def __str__(self) -> str:
        return self.message


class InvalidPayloadError(AppError):
    """Raised when a request body fails validation at the API boundary."""

    status = 400

    def __init__(
        self,
        message: str = "Invalid payload",
        user_message: str = _INVALID_PAYLOAD_MSG,
        details: list[dict] | None = None,
    ) -> None:
        super().__init__(message=message, user_message=user_message)
        self.details = details or []


class UnsupportedCurrencyError(AppError, KeyError):
    """Raised when a currency code has no entry in the exchange-rate table.

    Subclasses KeyError: a lookup against the table fails the same way a
    missing mapping key would.
    """

    status = 400

    def __init__(self, currency: str) -> None:
        super().__init__(
            message=f"Unsupported currency: {currency!r}",
            user_message=_UNSUPPORTED_CURRENCY_MSG,
        )
        self.currency = currency
