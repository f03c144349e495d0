class CentileRequestError(ValueError):
    """Error that aborts a whole centile request."""

    status_code = 500


class MissingFieldError(CentileRequestError):
    status_code = 400

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Missing required field: {field}")


class InvalidDateFormat(CentileRequestError):
    def __init__(self, date_text: str):
        self.date_text = date_text
        super().__init__(f"Invalid date format: {date_text}")


class MissingMeasurement(CentileRequestError):
    def __init__(self, message: str = "No measurements provided"):
        super().__init__(message)


class InvalidMeasurement(CentileRequestError):
    pass


class RemoteCalculationError(Exception):
    """A single measurement could not be calculated by the remote service."""
