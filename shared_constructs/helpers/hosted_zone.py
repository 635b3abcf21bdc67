"""
Hosted zone resolution.

Zone lookups are shared per stack: any number of constructs asking for
"example.com" in one stack get a single lookup construct.
"""

from typing import Optional, Union

from aws_cdk import aws_route53 as route53

from shared_constructs.constants import DEFAULT_ZONE_NAME, EnvVar, NAMESPACE_ZONE
from shared_constructs.errors import InvalidHostnameError, MissingInputError
from shared_constructs.helpers.cache import ResourceCache, default_cache, sanitize_domain_for_id
from shared_constructs.helpers.resolution import (
    ResolutionRequest,
    normalize_request,
    resolve_resource,
)
from shared_constructs.helpers.validation import is_valid_hostname
from shared_constructs.provisioning import CdkProvisioning, default_provisioning, resolution_scope


def resolve_hosted_zone(
    scope,
    zone: Union[None, bool, str, route53.IHostedZone] = None,
    *,
    hosted_zone_id: Optional[str] = None,
    name: str = DEFAULT_ZONE_NAME,
    cache: Optional[ResourceCache] = None,
    provisioning: Optional[CdkProvisioning] = None
) -> Optional[route53.IHostedZone]:
    """
    Resolves a hosted zone from a zone name, an existing zone, or a zone id.

    Args:
        scope: Construct requesting the zone
        zone: Zone name to look up (shared per stack), an IHostedZone to use
            as-is, or False to skip
        hosted_zone_id: Import by id instead of looking up; `zone` then only
            supplies the zone name
        name: Construct id prefix for created lookups/imports

    Returns:
        The hosted zone, or None when `zone` is False

    Raises:
        MissingInputError: neither a zone nor a hosted zone id was given
        InvalidHostnameError: the zone name is malformed
    """
    provisioning = provisioning or default_provisioning

    if hosted_zone_id:
        zone_name = zone if isinstance(zone, str) else None
        request = ResolutionRequest.import_reference(hosted_zone_id, domain=zone_name)
    elif zone is None:
        raise MissingInputError(
            f"zone is required (or set {EnvVar.API_HOSTED_ZONE} / {EnvVar.HOSTED_ZONE})"
        )
    else:
        request = normalize_request(zone, strings_are_references=False)

    if isinstance(zone, str) and not is_valid_hostname(zone):
        raise InvalidHostnameError(f"'{zone}' is not a valid hosted zone name")

    def create(stack, request):
        return provisioning.lookup_zone(stack, f"{name}-{sanitize_domain_for_id(request.domain)}", request.domain)

    def import_reference(_stack, reference):
        return provisioning.import_zone(scope, f"{name}-{reference}", reference, request.domain)

    return resolve_resource(
        resolution_scope(scope),
        request,
        namespace=NAMESPACE_ZONE,
        create=create,
        import_reference=import_reference,
        cache=cache,
    )


def clear_zone_cache(scope, cache: Optional[ResourceCache] = None) -> None:
    """
    Clears the hosted zone cache for the stack owning `scope`.
    Primarily useful for testing.
    """
    cache = default_cache if cache is None else cache
    cache.clear(resolution_scope(scope), NAMESPACE_ZONE)
