"""
Error types raised while resolving hostnames, zones and certificates.

Everything here is a ConfigurationError; failures coming from the CDK itself
are never wrapped.
"""


class ConfigurationError(RuntimeError):
    """Invalid or missing configuration detected during synthesis."""


class InvalidHostnameError(ConfigurationError):
    """A hostname or subdomain failed syntax validation."""


class MissingInputError(ConfigurationError):
    """A required domain or zone could not be resolved."""


class UnknownReferenceError(ConfigurationError):
    """An import reference is neither an ARN, a token nor an export name."""
