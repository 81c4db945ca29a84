class BungeeError(Exception):
    """Base class for everything raised by the Bungee client."""


class BungeeRequestError(BungeeError):
    """
    Raised when the quote request could not produce a usable response:
    connection/DNS/TLS failures, timeouts, or a body that is not JSON or
    does not match the ApiResponse envelope. The original exception is
    kept as __cause__.
    """


class BadChainIdError(BungeeError, ValueError):
    """Raised when a raw chain id does not match any SupportedChain."""

    def __init__(self, chain_id, msg: str = None):
        super().__init__(msg or f'Invalid chain ID: {chain_id!r}')
        self.chain_id = chain_id
