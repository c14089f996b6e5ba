# lexflow/exceptions.py


class LexFlowError(Exception):
    """Base exception for LexFlow."""

    def __init__(self, message, field=None):
        self.message = message
        self.field = field
        super().__init__(self.message)


class ValidationError(LexFlowError):
    """A draft or form failed validation; the message is shown to the user."""
    pass
