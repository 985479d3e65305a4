"""Errors raised while intercepting a Tomcat launch."""


class InterceptionError(Exception):
    """Base class for failures while patching a run configuration."""


class ConfigurationUnavailable(InterceptionError):
    """The start script or the Tomcat installation root could not be determined."""


class PatchUnavailable(InterceptionError):
    """The exec manager failed to produce a patch."""


class ReflectiveAccessFailure(InterceptionError):
    """A host object does not expose the internal attribute we need."""


class IOFailure(InterceptionError):
    """Canonicalizing an access or password file path failed."""
