class LandingFactoryError(Exception):
    """Base class for errors surfaced to callers of the build/publish core."""

    status_code = 500
    kind = "LandingFactoryError"


class NotFoundError(LandingFactoryError):
    status_code = 404
    kind = "NotFound"


class ValidationError(LandingFactoryError):
    status_code = 400
    kind = "ValidationError"


class InvariantViolation(LandingFactoryError):
    status_code = 400
    kind = "InvariantViolation"


class BuildInProgressError(LandingFactoryError):
    status_code = 409
    kind = "BuildInProgress"

    def __init__(self, site_id):
        super().__init__(f"A build is already in progress for site {site_id}")
        self.site_id = site_id


class RenderFailure(LandingFactoryError):
    """The renderer returned a non-success result or could not be reached."""

    status_code = 502
    kind = "RenderFailure"
