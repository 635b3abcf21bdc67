from shared_constructs.certificate import SharedCertificate
from shared_constructs.config import EnvConfig, get_config, is_consumer_env, is_provider_env
from shared_constructs.errors import (
    ConfigurationError,
    InvalidHostnameError,
    MissingInputError,
    UnknownReferenceError,
)
from shared_constructs.helpers import (
    HostConfig,
    HostnameConfig,
    ResourceCache,
    apex_zone_name,
    clear_all_caches,
    clear_certificate_cache,
    clear_zone_cache,
    env_hostname,
    is_valid_hostname,
    is_valid_subdomain,
    merge_domain,
    resolve_certificate,
    resolve_hosted_zone,
    resolve_hostname,
)
