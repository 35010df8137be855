"""
Custom exceptions for the Guardian token risk API
"""


class GuardianException(Exception):
    """Base exception for all custom exceptions"""

    status_code: int = 500

    def __init__(self, message: str, code: str = None):
        self.message = message
        self.code = code
        super().__init__(self.message)


# ===== Validation (HTTP 400) =====

class DataValidationError(GuardianException):
    """Raised when request data cannot identify an asset"""
    status_code = 400


class UnknownChainError(DataValidationError):
    """Raised when the chain key is not in the registry"""

    def __init__(self, chain_key: str = None):
        super().__init__("Unknown chain", code="unknown_chain")
        self.chain_key = chain_key


class MissingTokenError(DataValidationError):
    """Raised when the token/mint parameter is empty"""

    def __init__(self):
        super().__init__("Missing token/mint", code="missing_token")


class MissingTokenOrCenterError(DataValidationError):
    """Raised when the token or center parameter is empty"""

    def __init__(self):
        super().__init__("Missing token/center", code="missing_token_or_center")


class UnsupportedChainKindError(DataValidationError):
    """Raised when no pipeline handles the chain kind"""

    def __init__(self):
        super().__init__("Unsupported chain kind", code="unsupported_chain_kind")


class EvmOnlyError(DataValidationError):
    """Raised when an EVM-only endpoint is called for another chain"""

    def __init__(self):
        super().__init__("EVM only", code="evm_only")


class BadSolAddressError(DataValidationError):
    """Raised when an address does not look like a Solana address"""

    def __init__(self):
        super().__init__("Bad Sol address", code="bad_sol_address")


# ===== Collaborator failures (HTTP 500 when mandatory) =====

class ConnectionError(GuardianException):
    """Raised when connection to an RPC node or API fails"""
    pass


class APIError(GuardianException):
    """Raised when API request fails"""
    pass


class RateLimitError(GuardianException):
    """Raised when rate limit is exceeded"""
    pass


class ContractError(GuardianException):
    """Raised when smart contract interaction fails"""
    pass


class FeatureUnavailableError(GuardianException):
    """Raised when no analysis engine is configured for a feature"""
    pass


class CacheError(GuardianException):
    """Raised when cache operation fails"""
    pass
