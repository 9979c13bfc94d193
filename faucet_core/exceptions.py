"""Exceptions raised by the faucet core."""


class FaucetError(Exception):
    """Base exception for the faucet assistant."""


class ServiceError(FaucetError):
    """Raised when a call to the network information service fails."""


class CatalogUnavailable(ServiceError):
    """Raised when the supported-network catalog cannot be refreshed."""
