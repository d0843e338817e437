class CardSsrError(Exception):
    """Base class for errors raised by the card renderer."""


class StartupConfigError(CardSsrError):
    """Configuration or shell file problem that prevents the service from starting."""


class FetchError(CardSsrError):
    """Card metadata could not be obtained from the backend."""


class TransportError(FetchError):
    pass


class DecodeError(FetchError):
    pass


class BackendRejected(FetchError):
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
