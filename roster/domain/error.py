"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ExistenceLookupError(DomainError):
    """Raised when the batch-level existing-record lookup fails.

    Fatal for the whole batch: no partial outcome is produced.
    """

    def __init__(self, message: str):
        super().__init__(f"Existing record lookup failed: {message}")


# ============================================================================
# Per-invite errors (caught by the batch runner, reported as skipped)
# ============================================================================


class InvitationError(DomainError):
    """Base class for errors confined to a single invited email."""

    def __init__(self, email: str, message: str):
        self.email = email
        super().__init__(f"{message} ({email})")


class InvitationCreationError(InvitationError):
    """Raised when the account/profile transaction for an invite fails."""

    def __init__(self, email: str, cause: str):
        super().__init__(email, f"Could not create invite records: {cause}")


class VerificationCodeError(InvitationError):
    """Raised when a verification code cannot be issued for an invite."""

    def __init__(self, email: str, cause: str):
        super().__init__(email, f"Could not issue verification code: {cause}")


class NotificationError(InvitationError):
    """Raised when the invitation email cannot be delivered.

    The invite records are already committed when this is raised.
    """

    def __init__(self, email: str, cause: str):
        super().__init__(email, f"Could not send invitation email: {cause}")


class RefCodeExhaustedError(DomainError):
    """Raised when no unused reference code could be drawn."""

    def __init__(self, attempts: int):
        super().__init__(f"No unique reference code after {attempts} attempts")


# ============================================================================
# Invite lifecycle
# ============================================================================


class InviteAlreadyClaimedError(BusinessRuleViolationError):
    """Raised when acting on an invite that is no longer pending."""

    def __init__(self, affiliate_id: str):
        super().__init__(f"This invite has already been claimed: {affiliate_id}")


class InvalidVerificationCodeError(DomainError):
    """Raised when a verification code is missing, used or wrong."""

    def __init__(self, message: str = "Invalid verification code"):
        super().__init__(message)


class VerificationCodeExpiredError(InvalidVerificationCodeError):
    """Raised when a verification code has expired."""

    def __init__(self):
        super().__init__("The verification code has expired")


class VerificationAttemptsExceededError(InvalidVerificationCodeError):
    """Raised when a verification code has been guessed too many times."""

    def __init__(self):
        super().__init__("Too many failed verification attempts")


# ============================================================================
# Onboarding
# ============================================================================


class StepNotPendingError(BusinessRuleViolationError):
    """Raised when completing an onboarding step that is not pending."""

    def __init__(self, step: int):
        self.step = step
        super().__init__(f"Step {step} has already been completed")
