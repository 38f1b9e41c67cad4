"""Domain error taxonomy.

Validation errors are returned as values by ``validate_and_build`` and only
raised by the application services that act on them.
"""


class SchedulerError(Exception):
    """Base class for all message scheduling errors."""

    kind = "scheduler_error"


class MessageValidationError(SchedulerError):
    """A draft was rejected."""

    kind = "validation_error"
    field: str | None = None


class MissingFieldError(MessageValidationError):
    """A required field is absent, blank or malformed."""

    kind = "missing_field"

    def __init__(self, field: str, reason: str = "missing") -> None:
        self.field = field
        self.reason = reason
        if reason == "missing":
            super().__init__(f"Field '{field}' is required")
        else:
            super().__init__(f"Field '{field}' is {reason}")


class MissingSubjectForEmailError(MessageValidationError):
    """Email messages need a subject line."""

    kind = "missing_subject_for_email"
    field = "subject"

    def __init__(self) -> None:
        super().__init__("Subject is required for email messages")


class PastScheduleError(MessageValidationError):
    """The requested delivery time is not in the future."""

    kind = "past_schedule"
    field = "scheduled_for"

    def __init__(self) -> None:
        super().__init__("Message must be scheduled for a future date and time")


class MessageNotFoundError(SchedulerError):
    kind = "message_not_found"

    def __init__(self, message_id: str) -> None:
        self.message_id = message_id
        super().__init__(f"Message {message_id} not found")


class MessageNotEditableError(SchedulerError):
    kind = "message_not_editable"

    def __init__(self, message_id: str, status: str) -> None:
        self.message_id = message_id
        self.status = status
        super().__init__(f"Cannot edit message in {status} status")
