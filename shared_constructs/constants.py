"""
Shared constants for the construct library.

Tag keys, role values, environment names and the environment variables
consumed by hostname resolution and certificate sharing.
"""

# Apex marker ("@" in DNS tooling means "no subdomain")
APEX = "@"

# Resource namespaces sharing the resolution cache
NAMESPACE_CERTIFICATE = "certificate"
NAMESPACE_ZONE = "zone"


class Tag:
    ENV = "env"
    PROJECT = "project"
    ROLE = "role"
    SERVICE = "service"


class Role:
    API = "api"
    DEPLOY = "deploy"
    HOSTING = "hosting"
    MONITORING = "monitoring"
    NETWORKING = "networking"
    PROCESSING = "processing"
    SECURITY = "security"
    STACK = "stack"
    STORAGE = "storage"


class Env:
    DEMO = "demo"
    DEVELOPMENT = "development"
    EPHEMERAL = "ephemeral"  # legacy alias of PERSONAL
    LOCAL = "local"
    PERSONAL = "personal"
    PREVIEW = "preview"
    PRODUCTION = "production"
    RELEASE = "release"
    SANDBOX = "sandbox"


class EnvVar:
    # Project
    PROJECT_ENV = "PROJECT_ENV"
    PROJECT_KEY = "PROJECT_KEY"

    # Legacy consumer flags
    PERSONAL = "CDK_ENV_PERSONAL"
    EPHEMERAL = "CDK_ENV_EPHEMERAL"

    # Hostnames
    API_HOST_NAME = "CDK_ENV_API_HOST_NAME"
    API_SUBDOMAIN = "CDK_ENV_API_SUBDOMAIN"
    API_HOSTED_ZONE = "CDK_ENV_API_HOSTED_ZONE"
    WEB_HOST_NAME = "CDK_ENV_WEB_HOST_NAME"
    WEB_SUBDOMAIN = "CDK_ENV_WEB_SUBDOMAIN"
    WEB_HOSTED_ZONE = "CDK_ENV_WEB_HOSTED_ZONE"
    HOSTED_ZONE = "CDK_ENV_HOSTED_ZONE"

    # Structured hostname fallbacks
    DOMAIN = "CDK_ENV_DOMAIN"
    SUBDOMAIN = "CDK_ENV_SUBDOMAIN"


DEFAULT_PROJECT_KEY = "default"
DEFAULT_CERTIFICATE_NAME = "Certificate"
DEFAULT_ZONE_NAME = "HostedZone"
