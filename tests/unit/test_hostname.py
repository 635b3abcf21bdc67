"""
Tests for hostname composition and the resolution precedence.
"""

import pytest

from shared_constructs.errors import ConfigurationError, InvalidHostnameError, MissingInputError
from shared_constructs.helpers.hostname import (
    HostConfig,
    HostnameConfig,
    env_hostname,
    merge_domain,
    normalize_host,
    require_hostname,
    resolve_hostname,
)


class TestMergeDomain:

    def test_joins_subdomain_and_zone(self):
        assert merge_domain("api", "example.com") == "api.example.com"

    @pytest.mark.parametrize("subdomain", [None, "", "@"])
    def test_absent_subdomain_is_apex(self, subdomain):
        assert merge_domain(subdomain, "example.com") == "example.com"

    @pytest.mark.parametrize("zone", [None, ""])
    def test_missing_zone_raises(self, zone):
        with pytest.raises(MissingInputError):
            merge_domain("api", zone)


class TestEnvHostname:

    def test_returns_domain_alone(self):
        assert env_hostname(HostConfig(domain="example.com"), {}) == "example.com"

    def test_domain_falls_back_to_env_domain(self):
        assert env_hostname(HostConfig(), {"CDK_ENV_DOMAIN": "env-domain.com"}) == "env-domain.com"

    def test_domain_falls_back_to_hosted_zone(self):
        assert env_hostname(HostConfig(), {"CDK_ENV_HOSTED_ZONE": "hosted-zone.com"}) == "hosted-zone.com"

    def test_no_domain_raises(self):
        with pytest.raises(ConfigurationError, match="No hostname `domain` provided"):
            env_hostname(HostConfig(), {})

    def test_constructs_full_hostname(self):
        host = HostConfig(component="api", domain="example.com", env="sandbox", subdomain="us-east-1")
        assert env_hostname(host, {}) == "api.us-east-1.sandbox.example.com"

    @pytest.mark.parametrize("value", ["", "@"])
    def test_empty_and_apex_segments_are_skipped(self, value):
        assert env_hostname(HostConfig(component=value, domain="example.com"), {}) == "example.com"
        assert env_hostname(HostConfig(subdomain=value, domain="example.com"), {}) == "example.com"

    def test_apex_subdomain_still_falls_back_to_env(self):
        host = HostConfig(subdomain="@", domain="example.com")
        assert env_hostname(host, {"CDK_ENV_SUBDOMAIN": "fallback"}) == "fallback.example.com"

    def test_production_env_is_omitted(self):
        host = HostConfig(component="web", domain="example.com")
        assert env_hostname(host, {"PROJECT_ENV": "production"}) == "web.example.com"

    def test_environment_fills_missing_parts(self):
        host = HostConfig(component="api", domain="example.com", env="staging")
        assert env_hostname(host, {"CDK_ENV_SUBDOMAIN": "eu-west-1"}) == "api.eu-west-1.staging.example.com"

    def test_provided_values_win_over_environment(self):
        environ = {
            "CDK_ENV_DOMAIN": "env-domain.com",
            "CDK_ENV_SUBDOMAIN": "env-subdomain",
            "PROJECT_ENV": "env-env",
        }
        host = HostConfig(component="api", domain="override.com", env="override-env", subdomain="override-subdomain")
        assert env_hostname(host, environ) == "api.override-subdomain.override-env.override.com"

    def test_does_not_repeat_segments_already_in_domain(self):
        host = HostConfig(domain="sandbox.example.com", env="sandbox", subdomain="evaluations")
        assert env_hostname(host, {}) == "evaluations.sandbox.example.com"

        host = HostConfig(component="api", domain="api.evaluations.sandbox.example.com", env="sandbox", subdomain="evaluations")
        assert env_hostname(host, {}) == "api.evaluations.sandbox.example.com"

    def test_deduplicates_environment_values(self):
        environ = {
            "CDK_ENV_HOSTED_ZONE": "sandbox.example.com",
            "PROJECT_ENV": "sandbox",
            "CDK_ENV_SUBDOMAIN": "evaluations",
        }
        assert env_hostname(HostConfig(), environ) == "evaluations.sandbox.example.com"

    def test_never_produces_empty_labels(self):
        result = env_hostname(HostConfig(component="api", domain="example.com"), {})
        assert ".." not in result


class TestNormalizeHost:

    def test_string_is_explicit(self):
        config = normalize_host("api.example.com")
        assert config.explicit == "api.example.com"
        assert config.structured is None

    def test_mapping_is_structured(self):
        config = normalize_host({"domain": "example.com", "component": "api"})
        assert config.structured == HostConfig(domain="example.com", component="api")

    def test_web_surface_uses_web_variables(self):
        config = HostnameConfig.web()
        assert config.host_name_var == "CDK_ENV_WEB_HOST_NAME"
        assert config.subdomain_var == "CDK_ENV_WEB_SUBDOMAIN"
        assert config.zone_vars == ("CDK_ENV_WEB_HOSTED_ZONE", "CDK_ENV_HOSTED_ZONE")

    def test_rejects_unknown_shapes(self):
        with pytest.raises(TypeError):
            normalize_host(42)


class TestResolveHostname:

    environ = {
        "CDK_ENV_API_HOST_NAME": "host.env.com",
        "CDK_ENV_API_SUBDOMAIN": "sub",
        "CDK_ENV_API_HOSTED_ZONE": "zone.com",
    }

    def test_explicit_wins(self):
        config = HostnameConfig(
            explicit="explicit.example.com",
            structured=HostConfig(component="api", domain="structured.com"),
        )
        assert resolve_hostname(config, self.environ) == "explicit.example.com"

    def test_structured_wins_over_environment(self):
        config = HostnameConfig(structured=HostConfig(component="api", domain="structured.com"))
        assert resolve_hostname(config, self.environ) == "api.structured.com"

    def test_host_name_variable_wins_over_subdomain_pair(self):
        assert resolve_hostname(HostnameConfig(), self.environ) == "host.env.com"

    def test_subdomain_merges_with_primary_zone(self):
        environ = {
            "CDK_ENV_API_SUBDOMAIN": "api",
            "CDK_ENV_API_HOSTED_ZONE": "api-zone.com",
            "CDK_ENV_HOSTED_ZONE": "zone.com",
        }
        assert resolve_hostname(HostnameConfig(), environ) == "api.api-zone.com"

    def test_subdomain_falls_back_to_secondary_zone(self):
        environ = {"CDK_ENV_API_SUBDOMAIN": "api", "CDK_ENV_HOSTED_ZONE": "zone.com"}
        assert resolve_hostname(HostnameConfig(), environ) == "api.zone.com"

    def test_subdomain_without_zone_raises(self):
        with pytest.raises(MissingInputError):
            resolve_hostname(HostnameConfig(), {"CDK_ENV_API_SUBDOMAIN": "api"})

    def test_absent_when_nothing_configured(self):
        assert resolve_hostname(HostnameConfig(), {}) is None

    def test_structured_without_domain_is_absent(self):
        config = HostnameConfig(structured=HostConfig(component="api"))
        assert resolve_hostname(config, {}) is None

    def test_rejects_invalid_subdomain_variable(self):
        environ = {"CDK_ENV_API_SUBDOMAIN": "invalid subdomain with spaces", "CDK_ENV_API_HOSTED_ZONE": "example.com"}
        with pytest.raises(InvalidHostnameError, match="CDK_ENV_API_SUBDOMAIN is not a valid subdomain"):
            resolve_hostname(HostnameConfig(), environ)

    def test_rejects_invalid_zone_variable(self):
        with pytest.raises(InvalidHostnameError, match="CDK_ENV_HOSTED_ZONE is not a valid hostname"):
            resolve_hostname(HostnameConfig(), {"CDK_ENV_HOSTED_ZONE": "bad zone.com"})

    def test_rejects_invalid_explicit_hostname(self):
        with pytest.raises(ConfigurationError):
            resolve_hostname(HostnameConfig(explicit="bad host.example.com"), {})

    def test_require_hostname_raises_when_absent(self):
        with pytest.raises(MissingInputError, match="domain_name is required"):
            require_hostname(HostnameConfig(), {})
