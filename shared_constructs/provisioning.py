"""
Thin layer over the CDK calls that actually provision (or import) resources.

Resolution helpers only talk to a `CdkProvisioning`, so tests can swap in a
recording fake without synthesizing anything.
"""

from typing import Mapping, Optional
from aws_cdk import (
    CfnOutput,
    Fn,
    Stack,
    Tags,
    Token,
    aws_certificatemanager as acm,
    aws_route53 as route53
)
from constructs import Construct


def resolution_scope(scope):
    """
    The scope that owns cached resources: the enclosing Stack for constructs,
    the object itself otherwise.
    """
    if isinstance(scope, Construct):
        return Stack.of(scope)
    return scope


class CdkProvisioning:
    """
    Provisioning API backed by aws-cdk-lib.
    """

    def create_certificate(
        self,
        scope: Construct,
        construct_id: str,
        domain_name: str,
        zone: route53.IHostedZone,
        tags: Optional[Mapping[str, str]] = None
    ) -> acm.ICertificate:
        # Public certificate with DNS validation against the hosted zone
        certificate = acm.Certificate(scope, construct_id,
            domain_name=domain_name,
            validation=acm.CertificateValidation.from_dns(zone)
        )
        for key, value in (tags or {}).items():
            Tags.of(certificate).add(key, value)
        return certificate

    def import_certificate(self, scope: Construct, construct_id: str, certificate_arn: str) -> acm.ICertificate:
        return acm.Certificate.from_certificate_arn(scope, construct_id, certificate_arn)

    def lookup_zone(self, scope: Construct, construct_id: str, zone_name: str) -> route53.IHostedZone:
        # Requires account/region on the stack; resolved through cdk.context.json
        return route53.HostedZone.from_lookup(scope, construct_id, domain_name=zone_name)

    def import_zone(
        self,
        scope: Construct,
        construct_id: str,
        hosted_zone_id: str,
        zone_name: Optional[str] = None
    ) -> route53.IHostedZone:
        if zone_name:
            return route53.HostedZone.from_hosted_zone_attributes(scope, construct_id,
                hosted_zone_id=hosted_zone_id,
                zone_name=zone_name
            )
        return route53.HostedZone.from_hosted_zone_id(scope, construct_id, hosted_zone_id)

    def add_output(
        self,
        scope: Construct,
        construct_id: str,
        value: str,
        export_name: Optional[str] = None
    ) -> CfnOutput:
        return CfnOutput(scope, construct_id, value=value, export_name=export_name)

    def resolve_imported_value(self, export_name: str) -> str:
        return Fn.import_value(export_name)

    def is_unresolved(self, value: str) -> bool:
        return Token.is_unresolved(value)


default_provisioning = CdkProvisioning()
