"""Exception hierarchy for the orrery simulation."""


class OrreryError(Exception):
    """Base class for every error raised by the simulation core."""


class ConfigurationError(OrreryError):
    """A static body parameter is missing or invalid. Fatal at startup."""


class StateDesyncError(OrreryError):
    """The speed table has no entry for a body the updater is moving."""


class InputOutOfRange(OrreryError, ValueError):
    """A speed value outside the allowed range reached the speed table."""

    def __init__(self, body_id: str, value: float, low: float, high: float):
        super().__init__(
            f"Speed {value!r} for '{body_id}' outside [{low:g}, {high:g}]"
        )
        self.body_id = body_id
        self.value = value
        self.low = low
        self.high = high


class BodyNotFound(OrreryError, KeyError):
    """Lookup of a body id that was never registered."""

    def __init__(self, body_id: str):
        super().__init__(body_id)
        self.body_id = body_id

    def __str__(self):
        return f"Unknown body '{self.body_id}'"
