import os
from typing import Mapping, Optional
from dotenv import load_dotenv
from aws_cdk import RemovalPolicy

from shared_constructs.constants import DEFAULT_PROJECT_KEY, Env, EnvVar

# Load environment variables from a .env file
load_dotenv()


class EnvConfig:
    """
    Stores project-level configuration shared by every construct in an app.
    """
    def __init__(
        self,
        env_name: str,
        project_key: str,
        hosted_zone: Optional[str] = None,
        consumer: bool = False,
        provider: bool = False
    ):
        self.name = env_name
        self.project_key = project_key
        self.hosted_zone = hosted_zone

        # Certificate sharing role (see is_consumer_env / is_provider_env)
        self.consumer = consumer
        self.provider = provider

        # Data Lifecycle Policy:
        # In 'production', we retain resources to prevent accidental loss
        # of certificates and zones. Other environments clean up after themselves.
        if env_name == Env.PRODUCTION:
            self.removal_policy = RemovalPolicy.RETAIN
        else:
            self.removal_policy = RemovalPolicy.DESTROY


def is_consumer_env(environ: Optional[Mapping[str, str]] = None) -> bool:
    """
    Personal builds (and the legacy 'ephemeral' synonyms) import shared
    resources instead of creating their own.
    """
    environ = os.environ if environ is None else environ
    project_env = environ.get(EnvVar.PROJECT_ENV)
    return (
        project_env in (Env.PERSONAL, Env.EPHEMERAL)
        or bool(environ.get(EnvVar.PERSONAL))
        or bool(environ.get(EnvVar.EPHEMERAL))
    )


def is_provider_env(environ: Optional[Mapping[str, str]] = None) -> bool:
    """
    Sandbox builds export shared resources for consumers.
    A consumer flag always wins over PROJECT_ENV=sandbox.
    """
    environ = os.environ if environ is None else environ
    if is_consumer_env(environ):
        return False
    return environ.get(EnvVar.PROJECT_ENV) == Env.SANDBOX


def get_project_key(environ: Optional[Mapping[str, str]] = None) -> str:
    environ = os.environ if environ is None else environ
    return environ.get(EnvVar.PROJECT_KEY) or DEFAULT_PROJECT_KEY


def get_config(scope, environ: Optional[Mapping[str, str]] = None) -> EnvConfig:
    """
    Factory function to generate the EnvConfig object based on CDK context.
    Usage: cdk deploy -c env=sandbox
    """
    environ = os.environ if environ is None else environ

    # Context wins over PROJECT_ENV; default to 'development'
    env_name = (
        scope.node.try_get_context("env")
        or environ.get(EnvVar.PROJECT_ENV)
        or Env.DEVELOPMENT
    )

    print(f"🔍 Initializing CDK Infrastructure for environment: {env_name.upper()}")

    hosted_zone = environ.get(EnvVar.API_HOSTED_ZONE) or environ.get(EnvVar.HOSTED_ZONE)

    # Classify against the resolved environment name, not only PROJECT_ENV
    effective = dict(environ)
    effective[EnvVar.PROJECT_ENV] = env_name

    return EnvConfig(
        env_name=env_name,
        project_key=get_project_key(environ),
        hosted_zone=hosted_zone,
        consumer=is_consumer_env(effective),
        provider=is_provider_env(effective)
    )
