"""
Resolution policy shared by certificates and hosted zones.

Callers describe what they want with a loose value (False, True/None, a
string, or an existing handle). `normalize_request` turns that value into a
`ResolutionRequest` once, and `resolve_resource` acts on the request:

    DISABLED             -> None, nothing touched
    USE_PROVIDED         -> the handle, unchanged and never cached
    IMPORT_BY_REFERENCE  -> import_reference(scope, reference), never cached
    CREATE_OR_REUSE      -> cached handle for (scope, namespace, domain),
                            or create(scope, request) on the first call

Errors raised by the callbacks propagate unchanged. There are no retries.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

from shared_constructs.errors import MissingInputError, UnknownReferenceError
from shared_constructs.helpers.cache import ResourceCache, default_cache


class ResolutionMode(Enum):
    DISABLED = "disabled"
    USE_PROVIDED = "use_provided"
    IMPORT_BY_REFERENCE = "import_by_reference"
    CREATE_OR_REUSE = "create_or_reuse"


@dataclass(frozen=True)
class ResolutionRequest:
    mode: ResolutionMode
    domain: Optional[str] = None
    handle: Any = None
    reference: Optional[str] = None
    role_tag: Optional[str] = None

    @classmethod
    def disabled(cls) -> "ResolutionRequest":
        return cls(ResolutionMode.DISABLED)

    @classmethod
    def provided(cls, handle) -> "ResolutionRequest":
        return cls(ResolutionMode.USE_PROVIDED, handle=handle)

    @classmethod
    def import_reference(cls, reference: str, domain: Optional[str] = None) -> "ResolutionRequest":
        return cls(ResolutionMode.IMPORT_BY_REFERENCE, domain=domain, reference=reference)

    @classmethod
    def create_or_reuse(cls, domain: Optional[str], role_tag: Optional[str] = None) -> "ResolutionRequest":
        return cls(ResolutionMode.CREATE_OR_REUSE, domain=domain, role_tag=role_tag)


def normalize_request(
    value,
    domain: Optional[str] = None,
    role_tag: Optional[str] = None,
    strings_are_references: bool = True,
) -> ResolutionRequest:
    """
    Map a loose argument onto a ResolutionRequest.

    Strings are import references by default. Zone resolution passes
    strings_are_references=False because a zone string is a zone name to
    look up (and share), not an identifier.
    """
    if isinstance(value, ResolutionRequest):
        return value
    if value is False:
        return ResolutionRequest.disabled()
    if value is None or value is True:
        return ResolutionRequest.create_or_reuse(domain, role_tag)
    if isinstance(value, str):
        if strings_are_references:
            return ResolutionRequest.import_reference(value, domain=domain)
        return ResolutionRequest.create_or_reuse(value, role_tag)
    return ResolutionRequest.provided(value)


def resolve_resource(
    scope,
    request: ResolutionRequest,
    *,
    namespace: str,
    create: Callable[[Any, ResolutionRequest], Any],
    import_reference: Optional[Callable[[Any, str], Any]] = None,
    cache: Optional[ResourceCache] = None,
):
    """
    Apply the resolution policy for one request within `scope`.

    Args:
        scope: Resolution scope that owns the cache entries (a Stack)
        request: Normalized request
        namespace: Resource kind, keeps certificates and zones apart
        create: Provisioning callback, called at most once per cache key
        import_reference: Callback wrapping a reference string as a handle
        cache: Cache to use (defaults to the process-wide cache)

    Returns:
        The resolved handle, or None when the request is disabled
    """
    if cache is None:
        cache = default_cache

    if request.mode is ResolutionMode.DISABLED:
        return None

    if request.mode is ResolutionMode.USE_PROVIDED:
        return request.handle

    if request.mode is ResolutionMode.IMPORT_BY_REFERENCE:
        if not request.reference or not request.reference.strip():
            raise UnknownReferenceError(f"Empty reference given for {namespace}")
        if import_reference is None:
            raise UnknownReferenceError(f"{namespace} cannot be imported by reference")
        return import_reference(scope, request.reference)

    if not request.domain:
        raise MissingInputError(f"A domain is required to create a {namespace}")

    existing = cache.get(scope, namespace, request.domain)
    if existing is not None:
        print(f"⚡ Cache Hit: reusing {namespace} for {request.domain}")
        return existing

    print(f"🐢 Cache Miss: creating {namespace} for {request.domain}")
    handle = create(scope, request)
    cache.put(scope, namespace, request.domain, handle)
    return handle
