import itertools

import pytest

from shared_constructs.helpers import ResourceCache, clear_all_caches


class FakeHandle:
    """Stand-in for a provisioned resource: an identifier and a display name."""

    def __init__(self, identifier, name):
        self.identifier = identifier
        self.name = name

    @property
    def certificate_arn(self):
        return self.identifier

    def __repr__(self):
        return f"FakeHandle({self.identifier!r})"


class FakeScope:
    """A weakly referenceable stand-in for a stack."""


class FakeProvisioning:
    """Records every provisioning call instead of building CDK resources."""

    def __init__(self):
        self.calls = []
        self._serial = itertools.count(1)

    def create_certificate(self, scope, construct_id, domain_name, zone, tags=None):
        self.calls.append(("create_certificate", construct_id, domain_name, dict(tags or {})))
        return FakeHandle(
            f"arn:aws:acm:us-east-1:123456789012:certificate/{next(self._serial)}",
            domain_name,
        )

    def import_certificate(self, scope, construct_id, certificate_arn):
        self.calls.append(("import_certificate", construct_id, certificate_arn))
        return FakeHandle(certificate_arn, construct_id)

    def lookup_zone(self, scope, construct_id, zone_name):
        self.calls.append(("lookup_zone", construct_id, zone_name))
        return FakeHandle(f"/hostedzone/Z{next(self._serial):05d}", zone_name)

    def import_zone(self, scope, construct_id, hosted_zone_id, zone_name=None):
        self.calls.append(("import_zone", construct_id, hosted_zone_id, zone_name))
        return FakeHandle(hosted_zone_id, zone_name or hosted_zone_id)

    def add_output(self, scope, construct_id, value, export_name=None):
        self.calls.append(("add_output", construct_id, value, export_name))

    def resolve_imported_value(self, export_name):
        self.calls.append(("resolve_imported_value", export_name))
        return f"${{Token[ImportValue.{export_name}]}}"

    def is_unresolved(self, value):
        return "${Token[" in value

    def count(self, kind):
        return len([call for call in self.calls if call[0] == kind])


@pytest.fixture
def provisioning():
    return FakeProvisioning()


@pytest.fixture
def cache():
    return ResourceCache()


@pytest.fixture
def zone():
    return FakeHandle("/hostedzone/ZEXAMPLE", "example.com")


@pytest.fixture(autouse=True)
def reset_default_cache():
    yield
    clear_all_caches()
