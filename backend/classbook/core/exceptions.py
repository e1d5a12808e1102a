class AppError(Exception):
    """Base class for all application exceptions."""
    def __init__(self, message: str, status_code: int = 500, details: dict = None):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(AppError):
    """Raised when a request is missing fields or carries malformed values."""
    def __init__(self, message: str, details: dict = None):
        super().__init__(message, status_code=400, details=details)


class PastOrWeekendError(AppError):
    """Raised when a booking date is in the past or falls on a weekend."""
    def __init__(self, message: str = "Invalid booking date. Must be a future weekday", details: dict = None):
        super().__init__(message, status_code=400, details=details)


class BookingConflictError(AppError):
    """Base class for the three booking conflict kinds."""
    kind = "conflict"

    def __init__(self, message: str, details: dict = None):
        super().__init__(message, status_code=409, details=details)


class StaffRoomConflict(BookingConflictError):
    kind = "staff_room"

    def __init__(self, room: str, label: str):
        super().__init__(f"This room is reserved for {label}", details={"room": room, "kind": self.kind})


class RecurringConflict(BookingConflictError):
    kind = "recurring"

    def __init__(self, room: str, slot: str):
        super().__init__(
            "Room is unavailable due to regular classes at this time",
            details={"room": room, "timeSlot": slot, "kind": self.kind},
        )


class AlreadyBookedConflict(BookingConflictError):
    kind = "already_booked"

    def __init__(self, room: str, slot: str, date: str):
        super().__init__(
            "Room is already booked for this time slot on the selected date",
            details={"room": room, "timeSlot": slot, "date": date, "kind": self.kind},
        )


class NotFoundError(AppError):
    """Raised when a requested resource is not found."""
    def __init__(self, resource_type: str, resource_id: str):
        super().__init__(f"{resource_type} not found", status_code=404, details={"id": resource_id})


class InternalError(AppError):
    """Raised on unexpected storage or runtime failures."""
    def __init__(self, message: str = "Internal server error"):
        super().__init__(message, status_code=500)
