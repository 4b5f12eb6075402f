"""
Domain exceptions for the places service.
Each carries the HTTP status and the client-facing message it maps to.
"""


class PlacesError(Exception):
    """Base exception for the places service."""

    status_code = 500
    public_message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.public_message
        super().__init__(self.message)


class PlaceValidationError(PlacesError):
    status_code = 400
    public_message = "Invalid place data"


class PlaceNotFoundError(PlacesError):
    status_code = 404
    public_message = "Place not found"


class StoreUnavailableError(PlacesError):
    """Raised when the document store fails; the message is what clients see."""

    status_code = 500


class MapsScriptLoadError(PlacesError):
    status_code = 502
    public_message = "Failed to load Google Maps API"
