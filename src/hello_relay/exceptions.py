"""Error types raised by hello-relay."""


class RelayError(Exception):
    """Base class for hello-relay errors."""


class ConfigurationError(RelayError):
    """The configured external URL cannot be turned into a request."""


class DependencyError(RelayError):
    """The external call could not be completed."""


class WireMockError(RelayError):
    """A WireMock admin API call failed or returned an unexpected status."""
