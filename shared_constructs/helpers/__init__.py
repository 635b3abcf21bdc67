from shared_constructs.helpers.cache import (
    ResourceCache,
    default_cache,
    derive_key,
    sanitize_domain,
    sanitize_domain_for_id,
)
from shared_constructs.helpers.certificate import (
    clear_all_caches,
    clear_certificate_cache,
    import_certificate_reference,
    resolve_certificate,
)
from shared_constructs.helpers.hostname import (
    HostConfig,
    HostnameConfig,
    env_hostname,
    merge_domain,
    normalize_host,
    require_hostname,
    resolve_hostname,
    validate_hostname_env,
)
from shared_constructs.helpers.hosted_zone import clear_zone_cache, resolve_hosted_zone
from shared_constructs.helpers.naming import apex_zone_name, clean_export_name, get_export_name
from shared_constructs.helpers.resolution import (
    ResolutionMode,
    ResolutionRequest,
    normalize_request,
    resolve_resource,
)
from shared_constructs.helpers.validation import is_valid_hostname, is_valid_subdomain
