"""
Hostname resolution.

A construct that needs a hostname can receive it three ways: an explicit
string, a structured `HostConfig`, or nothing at all, in which case the
environment is consulted. `resolve_hostname` applies a fixed precedence:

1. explicit string
2. structured config composed by `env_hostname`
3. the "host name" variable (e.g. CDK_ENV_API_HOST_NAME)
4. the "subdomain" variable merged with the first zone variable that is set
   (e.g. CDK_ENV_API_HOSTED_ZONE, then CDK_ENV_HOSTED_ZONE)
5. absent (None)

Absence is not an error here; constructs that require a hostname raise
`MissingInputError` themselves (see `require_hostname`).
"""

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional, Tuple, Union

from shared_constructs.constants import APEX, Env, EnvVar
from shared_constructs.errors import InvalidHostnameError, MissingInputError
from shared_constructs.helpers.validation import is_valid_hostname, is_valid_subdomain


@dataclass(frozen=True)
class HostConfig:
    """Parts of a hostname, joined as component.subdomain.env.domain"""
    domain: Optional[str] = None
    subdomain: Optional[str] = None
    env: Optional[str] = None
    component: Optional[str] = None


@dataclass(frozen=True)
class HostnameConfig:
    explicit: Optional[str] = None
    structured: Optional[HostConfig] = None
    host_name_var: str = EnvVar.API_HOST_NAME
    subdomain_var: str = EnvVar.API_SUBDOMAIN
    zone_vars: Tuple[str, ...] = field(
        default=(EnvVar.API_HOSTED_ZONE, EnvVar.HOSTED_ZONE)
    )

    @classmethod
    def api(cls, host=None) -> "HostnameConfig":
        return normalize_host(host, surface="api")

    @classmethod
    def web(cls, host=None) -> "HostnameConfig":
        return normalize_host(host, surface="web")


_SURFACES = {
    "api": (EnvVar.API_HOST_NAME, EnvVar.API_SUBDOMAIN, (EnvVar.API_HOSTED_ZONE, EnvVar.HOSTED_ZONE)),
    "web": (EnvVar.WEB_HOST_NAME, EnvVar.WEB_SUBDOMAIN, (EnvVar.WEB_HOSTED_ZONE, EnvVar.HOSTED_ZONE)),
}


def normalize_host(
    host: Union[None, str, HostConfig, Mapping[str, str]] = None,
    surface: str = "api",
) -> HostnameConfig:
    """
    Turns the accepted argument shapes (string, HostConfig, dict, None) into
    a single HostnameConfig for the given surface ("api" or "web").
    """
    if surface not in _SURFACES:
        raise ValueError(f"Unknown hostname surface: {surface}")
    host_name_var, subdomain_var, zone_vars = _SURFACES[surface]

    explicit = None
    structured = None
    if isinstance(host, str):
        explicit = host or None
    elif isinstance(host, HostConfig):
        structured = host
    elif isinstance(host, dict):
        structured = HostConfig(**host)
    elif host is not None:
        raise TypeError(f"Unsupported host value: {host!r}")

    return HostnameConfig(
        explicit=explicit,
        structured=structured,
        host_name_var=host_name_var,
        subdomain_var=subdomain_var,
        zone_vars=zone_vars,
    )


def _segment(value: Optional[str]) -> Optional[str]:
    # "" and "@" both mean "no segment"
    if not value or value == APEX:
        return None
    return value


def merge_domain(subdomain: Optional[str], zone: Optional[str]) -> str:
    """
    Joins a subdomain onto a zone. An absent subdomain (or "@") yields the apex.
    """
    if not zone:
        raise MissingInputError(
            f"Cannot merge subdomain '{subdomain}' without a zone"
        )
    subdomain = _segment(subdomain)
    if subdomain is None:
        return zone
    return f"{subdomain}.{zone}"


def _compose(host: HostConfig, environ: Mapping[str, str]) -> Optional[str]:
    domain = host.domain or environ.get(EnvVar.DOMAIN) or environ.get(EnvVar.HOSTED_ZONE)
    if not domain:
        return None

    component = _segment(host.component)
    subdomain = _segment(host.subdomain) or _segment(environ.get(EnvVar.SUBDOMAIN))
    env = _segment(host.env) or _segment(environ.get(EnvVar.PROJECT_ENV))
    if env == Env.PRODUCTION:
        env = None

    # Skip segments the domain already carries
    labels = {label.lower() for label in domain.split(".")}
    parts = [
        part for part in (component, subdomain, env)
        if part and part.lower() not in labels
    ]
    return ".".join(parts + [domain])


def env_hostname(
    host: Optional[HostConfig] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> str:
    """
    Compose a hostname from a HostConfig, filling gaps from the environment.

    domain falls back to CDK_ENV_DOMAIN then CDK_ENV_HOSTED_ZONE, subdomain to
    CDK_ENV_SUBDOMAIN and env to PROJECT_ENV. Production contributes no env
    segment, so production hostnames sit directly on the domain.

    Raises:
        MissingInputError: no domain is available at all
    """
    environ = os.environ if environ is None else environ
    hostname = _compose(host or HostConfig(), environ)
    if hostname is None:
        raise MissingInputError(
            "No hostname `domain` provided. "
            f"Set {EnvVar.DOMAIN} or {EnvVar.HOSTED_ZONE} to use environment domain"
        )
    return hostname


def validate_hostname_env(
    config: HostnameConfig,
    environ: Optional[Mapping[str, str]] = None,
) -> None:
    """Rejects malformed subdomain / zone variables before anything is built."""
    environ = os.environ if environ is None else environ

    subdomain = environ.get(config.subdomain_var)
    if subdomain and subdomain != APEX and not is_valid_subdomain(subdomain):
        raise InvalidHostnameError(f"{config.subdomain_var} is not a valid subdomain")

    for zone_var in config.zone_vars:
        zone = environ.get(zone_var)
        if zone and not is_valid_hostname(zone):
            raise InvalidHostnameError(f"{zone_var} is not a valid hostname")


def resolve_hostname(
    config: Optional[HostnameConfig] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Optional[str]:
    """
    Resolve one hostname from `config` and the environment, or None.

    Raises:
        InvalidHostnameError: an environment variable or the result is malformed
        MissingInputError: a subdomain variable is set but no zone variable is
    """
    environ = os.environ if environ is None else environ
    config = config or HostnameConfig()

    validate_hostname_env(config, environ)

    if config.explicit:
        hostname = config.explicit
    elif config.structured is not None:
        hostname = _compose(config.structured, environ)
    elif environ.get(config.host_name_var):
        hostname = environ[config.host_name_var]
    elif environ.get(config.subdomain_var):
        zone = next(
            (environ[var] for var in config.zone_vars if environ.get(var)),
            None,
        )
        hostname = merge_domain(environ[config.subdomain_var], zone)
    else:
        return None

    if hostname is not None and not is_valid_hostname(hostname):
        raise InvalidHostnameError(f"'{hostname}' is not a valid hostname")
    return hostname


def require_hostname(
    config: Optional[HostnameConfig] = None,
    environ: Optional[Mapping[str, str]] = None,
    what: str = "domain_name",
) -> str:
    """resolve_hostname, but absence is a MissingInputError."""
    config = config or HostnameConfig()
    hostname = resolve_hostname(config, environ)
    if not hostname:
        raise MissingInputError(
            f"{what} is required (or set {config.host_name_var} / {config.subdomain_var})"
        )
    return hostname
