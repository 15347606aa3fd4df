# === SRP error taxonomy ===


class SrpError(Exception):
    """Base class for every error raised by the SRP core."""


class AuthenticationError(SrpError):
    """The current authentication attempt failed; restart from step 1."""


class MalformedRequestError(SrpError):
    """A request is missing a required field or carries an invalid value."""
