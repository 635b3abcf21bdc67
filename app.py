import os
import aws_cdk as cdk
from shared_constructs import HostnameConfig, resolve_hostname
from shared_constructs.config import get_config
from stacks.certificate_stack import CertificateStack

app = cdk.App()
config = get_config(app)

# =================================================================
# CERTIFICATE STACK (Global - us-east-1)
# =================================================================
# ACM Certificates for CloudFront must be created in us-east-1.
domain_name = resolve_hostname(HostnameConfig.api(app.node.try_get_context("domain")))

if domain_name:
    cert_env = cdk.Environment(
        account=os.getenv("CDK_DEFAULT_ACCOUNT"),
        region="us-east-1"
    )
    CertificateStack(
        app, f"SharedCert-{config.name}",
        config=config,
        domain_name=domain_name,
        env=cert_env
    )
else:
    print("⏭️ Skipping CertificateStack: no hostname configured (set CDK_ENV_API_HOST_NAME or CDK_ENV_API_SUBDOMAIN)")

app.synth()
