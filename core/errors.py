class GymError(Exception):
    """Base class for errors raised by the gym store."""


class NotFound(GymError):
    def __init__(self, kind, record_id):
        super().__init__(f"{kind} {record_id} not found")
        self.kind = kind
        self.record_id = record_id


class DeleteBlocked(GymError):
    """A delete that would leave other records pointing at nothing."""

    def __init__(self, message, count):
        super().__init__(message)
        self.message = message
        self.count = count


class FormError(GymError):
    """Submitted form data failed validation; ``errors`` maps field -> message."""

    def __init__(self, errors):
        super().__init__("; ".join(f"{k}: {v}" for k, v in errors.items()))
        self.errors = errors
