"""
Deterministic naming for shared resources.

Export naming convention: env-{kind}-{project_key}-{resource}-{name}
Examples:
  - env-sandbox-myproject-cert-api-example-com   (sandbox provider)
  - env-sandbox-myproject-cert-api-example-com   (personal consumer, same name)
  - env-production-myproject-cert-example-com

Provider and consumer builds never talk to each other; they agree on the
export name because both derive it the same way.
"""

import os
import re
from typing import Mapping, Optional

import tldextract

from shared_constructs.config import get_project_key, is_consumer_env, is_provider_env
from shared_constructs.constants import Env, EnvVar

_EXPORT_NAME_RE = re.compile(r"[A-Za-z0-9:-]+")
_UNSAFE_EXPORT_CHARS = re.compile(r"[^A-Za-z0-9:-]")

# Bundled public suffix snapshot only; synthesis never fetches the list
_extract = tldextract.TLDExtract(suffix_list_urls=())


def clean_export_name(name: str) -> str:
    """Keep only characters CloudFormation allows in export names."""
    return _UNSAFE_EXPORT_CHARS.sub("", name)


def is_export_name(value: str) -> bool:
    return _EXPORT_NAME_RE.fullmatch(value) is not None


def get_export_kind(environ: Optional[Mapping[str, str]] = None) -> str:
    """
    Environment segment of an export name. Consumers always read what the
    sandbox provider wrote.
    """
    environ = os.environ if environ is None else environ
    if is_provider_env(environ):
        return environ[EnvVar.PROJECT_ENV]
    if is_consumer_env(environ):
        return Env.SANDBOX
    return environ.get(EnvVar.PROJECT_ENV) or "default"


def get_export_name(resource: str, name: str, environ: Optional[Mapping[str, str]] = None) -> str:
    """
    Generate the export name shared by provider and consumer builds.

    Args:
        resource: Short resource kind (e.g., 'cert')
        name: Sanitized resource name (e.g., 'api-example-com')
        environ: Environment mapping (defaults to os.environ)

    Returns:
        Cleaned export name
    """
    kind = get_export_kind(environ)
    project_key = get_project_key(environ)
    return clean_export_name(f"env-{kind}-{project_key}-{resource}-{name}")


def apex_zone_name(hostname: str) -> str:
    """
    Extract the root zone (e.g., 'example.com' from 'api.sub.example.com').
    """
    extracted = _extract(hostname)
    if not extracted.domain or not extracted.suffix:
        return hostname
    return f"{extracted.domain}.{extracted.suffix}"
