from typing import Optional
from aws_cdk import Stack
from constructs import Construct

from shared_constructs import SharedCertificate, apex_zone_name
from shared_constructs.config import EnvConfig


class CertificateStack(Stack):
    """
    Owns the shared API certificate for a deployment.
    Note: certificates used by CloudFront MUST live in us-east-1.
    """
    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        config: EnvConfig,
        domain_name: str,
        zone_name: Optional[str] = None,
        **kwargs
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        # 1. Fall back to the root zone (e.g., 'example.com' from 'sub.example.com')
        zone_name = zone_name or config.hosted_zone or apex_zone_name(domain_name)

        # 2. Create, export or import depending on the environment role
        self.shared_certificate = SharedCertificate(self,
            domain_name=domain_name,
            zone=zone_name,
            consumer=config.consumer,
            provider=config.provider
        )
        self.certificate = self.shared_certificate.certificate

        # 3. Apply the environment's lifecycle policy to what this stack created
        if not config.consumer:
            self.certificate.apply_removal_policy(config.removal_policy)
