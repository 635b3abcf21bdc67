"""
Certificate resolution.

When a certificate is created it is created at STACK level (not under the
construct that asked for it) and cached by domain. Swapping one construct
for another that serves the same domain therefore keeps the certificate
instead of replacing it, and any number of constructs can share one.
"""

from typing import Optional, Union

from aws_cdk import (
    aws_certificatemanager as acm,
    aws_route53 as route53
)

from shared_constructs.constants import (
    DEFAULT_CERTIFICATE_NAME,
    NAMESPACE_CERTIFICATE,
    Role,
    Tag,
)
from shared_constructs.errors import InvalidHostnameError, MissingInputError, UnknownReferenceError
from shared_constructs.helpers.cache import ResourceCache, default_cache, sanitize_domain_for_id
from shared_constructs.helpers.hosted_zone import resolve_hosted_zone
from shared_constructs.helpers.naming import is_export_name
from shared_constructs.helpers.resolution import ResolutionMode, normalize_request, resolve_resource
from shared_constructs.helpers.validation import is_valid_hostname
from shared_constructs.provisioning import CdkProvisioning, default_provisioning, resolution_scope


def is_valid_certificate_domain(domain_name: str) -> bool:
    """A hostname, optionally with a leading wildcard label (*.example.com)."""
    if isinstance(domain_name, str) and domain_name.startswith("*."):
        domain_name = domain_name[2:]
    return is_valid_hostname(domain_name)


def certificate_id(name: str, domain_name: Optional[str]) -> str:
    if not domain_name:
        return f"{name}-Imported"
    return f"{name}-{sanitize_domain_for_id(domain_name)}"


def import_certificate_reference(
    scope,
    reference: str,
    construct_id: str,
    provisioning: Optional[CdkProvisioning] = None
) -> acm.ICertificate:
    """
    Wraps an ARN (or unresolved token) directly; anything shaped like an
    export name is imported through Fn.importValue first.
    """
    provisioning = provisioning or default_provisioning

    if reference.startswith("arn:") or provisioning.is_unresolved(reference):
        return provisioning.import_certificate(scope, construct_id, reference)

    if is_export_name(reference):
        certificate_arn = provisioning.resolve_imported_value(reference)
        return provisioning.import_certificate(scope, construct_id, certificate_arn)

    raise UnknownReferenceError(
        f"'{reference}' is neither a certificate ARN nor an export name"
    )


def resolve_certificate(
    scope,
    certificate: Union[None, bool, str, acm.ICertificate] = True,
    *,
    domain_name: Optional[str] = None,
    zone: Union[None, str, route53.IHostedZone] = None,
    name: str = DEFAULT_CERTIFICATE_NAME,
    role_tag: str = Role.API,
    cache: Optional[ResourceCache] = None,
    provisioning: Optional[CdkProvisioning] = None
) -> Optional[acm.ICertificate]:
    """
    Resolves a certificate based on input type.

    - True / None: create at stack level, or reuse the one already cached
      for `domain_name` in this stack
    - False: no certificate
    - ICertificate: returned as-is, never cached
    - str: imported from an ARN or export name, never cached

    Args:
        scope: The construct scope (used to find the stack)
        certificate: Certificate input, see above
        domain_name: Domain name for the certificate (required to create)
        zone: Hosted zone (or zone name) for DNS validation (required to create)
        name: Construct id prefix
        role_tag: Value of the `role` tag on created certificates

    Returns:
        The resolved certificate, or None if certificate is False

    Raises:
        MissingInputError: creating without a domain or a zone
        InvalidHostnameError: creating for a malformed domain_name
        UnknownReferenceError: an import string that cannot be interpreted

    Example:
        cert = resolve_certificate(self, domain_name="api.example.com", zone=hosted_zone)
    """
    provisioning = provisioning or default_provisioning
    request = normalize_request(certificate, domain=domain_name, role_tag=role_tag)

    if (
        request.mode is ResolutionMode.CREATE_OR_REUSE
        and domain_name
        and not is_valid_certificate_domain(domain_name)
    ):
        raise InvalidHostnameError(f"'{domain_name}' is not a valid certificate domain")

    def create(stack, request):
        # Fail before anything is provisioned
        if zone is None or zone is False:
            raise MissingInputError(
                f"zone is required to validate the certificate for {request.domain}"
            )
        hosted_zone = resolve_hosted_zone(scope, zone, cache=cache, provisioning=provisioning)
        return provisioning.create_certificate(
            stack,
            certificate_id(name, request.domain),
            request.domain,
            hosted_zone,
            tags={Tag.ROLE: request.role_tag or role_tag},
        )

    def import_reference(_stack, reference):
        return import_certificate_reference(
            scope, reference, certificate_id(name, domain_name), provisioning
        )

    return resolve_resource(
        resolution_scope(scope),
        request,
        namespace=NAMESPACE_CERTIFICATE,
        create=create,
        import_reference=import_reference,
        cache=cache,
    )


def clear_certificate_cache(scope, cache: Optional[ResourceCache] = None) -> None:
    """
    Clears the certificate cache for the stack owning `scope`.
    Primarily useful for testing.
    """
    cache = default_cache if cache is None else cache
    cache.clear(resolution_scope(scope), NAMESPACE_CERTIFICATE)


def clear_all_caches(cache: Optional[ResourceCache] = None) -> None:
    """Clears certificates and zones for every stack."""
    cache = default_cache if cache is None else cache
    cache.clear_all()
