"""
Engine Errors

Every error is raised before any state change, so a failed call leaves the
contract exactly as it was.
"""


class SimpleNftError(Exception):
    """Base exception for contract errors"""

    pass


class NoDefinitionAvailable(SimpleNftError):
    """Mint attempted before any token definition was created"""

    def __init__(self):
        super().__init__("No token definition available to mint against")


class InsufficientPayment(SimpleNftError):
    """Mint payment below the configured fee"""

    def __init__(self, payment: int, required: int):
        self.payment = payment
        self.required = required
        super().__init__(f"Insufficient payment: got {payment}, required {required}")


class UnknownToken(SimpleNftError):
    """Token id was never minted"""

    def __init__(self, token_id: int):
        self.token_id = token_id
        super().__init__(f"Unknown token: {token_id}")


class UnknownDefinition(SimpleNftError):
    """Definition id was never created"""

    def __init__(self, definition_id: int):
        self.definition_id = definition_id
        super().__init__(f"Unknown definition: {definition_id}")
