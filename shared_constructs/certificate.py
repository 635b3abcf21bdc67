import os
from typing import Mapping, Optional, Union
from aws_cdk import (
    aws_certificatemanager as acm,
    aws_route53 as route53
)
from constructs import Construct

from shared_constructs.config import is_consumer_env, is_provider_env
from shared_constructs.constants import EnvVar, Role
from shared_constructs.errors import MissingInputError
from shared_constructs.helpers.cache import ResourceCache, sanitize_domain_for_id
from shared_constructs.helpers.certificate import resolve_certificate
from shared_constructs.helpers.hostname import HostConfig, normalize_host, require_hostname
from shared_constructs.helpers.hosted_zone import resolve_hosted_zone
from shared_constructs.helpers.naming import clean_export_name, get_export_name
from shared_constructs.provisioning import CdkProvisioning, default_provisioning

EXPORT_RESOURCE = "cert"


class SharedCertificate(Construct):
    """
    A standalone certificate that other constructs can share.

    Uses resolve_certificate() internally, so the certificate lives at stack
    level and is cached by domain: any construct resolving the same domain in
    the same stack gets this certificate instead of creating another.

    Provider/consumer sharing across deployments:
    - provider (PROJECT_ENV=sandbox) creates the certificate and exports its ARN
    - consumer (PROJECT_ENV=personal, CDK_ENV_PERSONAL, ...) creates nothing and
      imports the ARN by the same deterministic export name

    Usage:
        SharedCertificate(self)  # domain and zone from the environment
        SharedCertificate(self, domain_name="api.example.com", zone="example.com")
        SharedCertificate(self, "ApiCert", domain_name="api.example.com", zone=zone)
    """
    def __init__(
        self,
        scope: Construct,
        construct_id: Optional[str] = None,
        *,
        domain_name: Union[None, str, HostConfig] = None,
        zone: Union[None, str, route53.IHostedZone] = None,
        consumer: Optional[bool] = None,
        provider: Optional[bool] = None,
        export: Optional[str] = None,
        role_tag: str = Role.API,
        environ: Optional[Mapping[str, str]] = None,
        cache: Optional[ResourceCache] = None,
        provisioning: Optional[CdkProvisioning] = None
    ) -> None:
        environ = os.environ if environ is None else environ
        provisioning = provisioning or default_provisioning

        # Resolve (and validate) the domain before the construct exists
        domain_name = require_hostname(normalize_host(domain_name, "api"), environ, what="domain_name")
        sanitized_domain = sanitize_domain_for_id(domain_name)

        super().__init__(scope, construct_id or f"SharedCert-{sanitized_domain}")

        if consumer is None:
            consumer = is_consumer_env(environ)
        if provider is None:
            provider = is_provider_env(environ)

        self.domain_name = domain_name
        self.export_name = (
            clean_export_name(export) if export
            else get_export_name(EXPORT_RESOURCE, sanitized_domain, environ)
        )

        if consumer:
            # =================================================================
            # CONSUMER: import the provider's certificate by export name
            # =================================================================
            print(f"📥 Importing shared certificate from export: {self.export_name}")
            self.certificate_arn = provisioning.resolve_imported_value(self.export_name)
            self.certificate: acm.ICertificate = provisioning.import_certificate(
                self, "ImportedCertificate", self.certificate_arn
            )
            provisioning.add_output(self, "ConsumedCertificateArn", self.certificate_arn)
            return

        # =================================================================
        # CREATE (or reuse) at stack level
        # =================================================================
        zone = zone or environ.get(EnvVar.API_HOSTED_ZONE) or environ.get(EnvVar.HOSTED_ZONE)
        if not zone:
            raise MissingInputError(
                "zone is required for SharedCertificate when not consuming "
                f"(or set {EnvVar.API_HOSTED_ZONE} / {EnvVar.HOSTED_ZONE})"
            )

        hosted_zone = resolve_hosted_zone(self, zone, cache=cache, provisioning=provisioning)
        self.certificate = resolve_certificate(self, True,
            domain_name=domain_name,
            zone=hosted_zone,
            role_tag=role_tag,
            cache=cache,
            provisioning=provisioning
        )
        self.certificate_arn = self.certificate.certificate_arn

        if provider:
            print(f"📤 Exporting shared certificate as: {self.export_name}")
            provisioning.add_output(self, "ProvidedCertificateArn", self.certificate_arn,
                export_name=self.export_name
            )
        else:
            provisioning.add_output(self, "CertificateArn", self.certificate_arn)
