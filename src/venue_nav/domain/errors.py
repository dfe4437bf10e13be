# domain/errors.py


class VenueConfigError(ValueError):
    """Venue dataset cannot back a map; raised while building, never while routing."""


class DuplicateNodeError(VenueConfigError):
    pass


class UnknownNodeError(VenueConfigError):
    pass


class DuplicateEdgeError(VenueConfigError):
    pass


class InvalidEdgeLengthError(VenueConfigError):
    pass


class DisconnectedVenueError(VenueConfigError):
    def __init__(self, unreachable: list[str]):
        self.unreachable = unreachable
        super().__init__(f"POIs unreachable from the rest of the venue: {unreachable}")


class EmptyVenueError(VenueConfigError):
    pass
