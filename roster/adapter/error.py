"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class EmailDeliveryError(AdapterError):
    """Email provider rejected a message or could not be reached."""

    pass


class TemplateError(AdapterError):
    """Unknown email template or missing template variable."""

    pass
