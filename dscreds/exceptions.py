class CredentialValidationError(ValueError):
    """Raised when a credential field fails validation.

    Carries the credential data key of the offending field and a human
    readable reason. Not retryable, the caller has to build a new instance
    with corrected input.
    """

    def __init__(self, field_name: str, reason: str) -> None:
        self.field_name = field_name
        self.reason = reason
        super().__init__(f'{field_name} {reason}')


class UnknownCredentialType(ValueError):
    pass
