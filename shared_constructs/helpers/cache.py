"""
Per-scope store of shared resources.

Every stack ("resolution scope") gets its own map of cache key to resource
handle, so two constructs in one stack asking for the same certificate get
the same object while two stacks never share. Entries live until the scope
is cleared or garbage collected; there is no expiry.
"""

import re
import weakref
from typing import Any, Dict, Optional

_NON_ID_CHARS = re.compile(r"[^a-z0-9-]")


def sanitize_domain(domain: str) -> str:
    """
    Lower-cases a domain and replaces dots with hyphens.

    Note that case and a trailing dot are not significant, and a
    pre-sanitized value collides with its dotted form
    ("api-example-com" == "api.example.com").
    """
    return domain.strip().rstrip(".").lower().replace(".", "-")


def sanitize_domain_for_id(domain: str) -> str:
    """sanitize_domain, minus anything a construct id should not carry (e.g. '*')."""
    return _NON_ID_CHARS.sub("", sanitize_domain(domain))


def derive_key(namespace: str, domain: str) -> str:
    return f"{namespace}:{sanitize_domain(domain)}"


class ResourceCache:
    """
    Maps (scope, namespace, domain) to a resource handle.

    Scopes are compared by identity and held weakly, so a stack that is no
    longer referenced drops its entries. get/put do not enforce create-once;
    callers check with get before provisioning.
    """

    def __init__(self):
        self._scopes: "weakref.WeakKeyDictionary[Any, Dict[str, Any]]" = weakref.WeakKeyDictionary()

    def get(self, scope, namespace: str, domain: str) -> Optional[Any]:
        entries = self._scopes.get(scope)
        if entries is None:
            return None
        return entries.get(derive_key(namespace, domain))

    def put(self, scope, namespace: str, domain: str, handle: Any) -> None:
        # Created lazily on first use within a scope
        entries = self._scopes.setdefault(scope, {})
        entries[derive_key(namespace, domain)] = handle

    def clear(self, scope, namespace: Optional[str] = None) -> None:
        """
        Drop everything cached for `scope`, or only one namespace of it.
        """
        entries = self._scopes.get(scope)
        if entries is None:
            return
        if namespace is None:
            del self._scopes[scope]
            return
        prefix = f"{namespace}:"
        for key in [key for key in entries if key.startswith(prefix)]:
            del entries[key]

    def clear_all(self) -> None:
        self._scopes.clear()

    def __len__(self) -> int:
        return sum(len(entries) for entries in self._scopes.values())


# Shared by every construct that does not pass its own cache
default_cache = ResourceCache()
