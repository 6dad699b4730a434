class FlapGateError(Exception):
    """Base exception for all flapgate errors."""


class SensorIOError(FlapGateError):
    """The accelerometer could not be initialized or read."""


class MissingOrMalformedRecord(FlapGateError):
    """The calibration file is absent, corrupt or incomplete."""

    def __init__(self, message, path=""):
        self.path = path
        super().__init__(message)


class NotificationPublishError(FlapGateError):
    """A status update could not be delivered."""


class NotifierConfigError(FlapGateError):
    """The notifier is missing its access token or client."""
