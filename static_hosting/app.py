#!/usr/bin/env python3
"""CDK application entry point for static hosting infrastructure."""

import sys
from pathlib import Path

# Add the project root to the Python path
sys.path.insert(0, str(Path(__file__).parent.parent))

import aws_cdk as cdk
import boto3

from static_hosting.config import Config
from static_hosting.stacks.hosting_stack import StaticHostingStack


def get_account_id() -> str:
  """Get AWS account ID from current credentials."""
  sts = boto3.client("sts")
  return str(sts.get_caller_identity()["Account"])


def stack_name_for(site_name: str) -> str:
  return f"StaticHosting-{site_name.replace('.', '-')}"


def main() -> None:
  """Create CDK app with a stack for each configured site."""
  app = cdk.App()

  # Load configuration
  config_path = app.node.try_get_context("config") or "sites.yaml"
  config = Config.from_yaml(Path(config_path))

  # Hosted zone lookups need a concrete account
  account_id = get_account_id()

  for site in config.sites:
    stack_name = stack_name_for(site.site_name)
    print(f"Defining {stack_name} for {site.site_name}")
    StaticHostingStack(
      app,
      stack_name,
      hosting_config=site,
      env=cdk.Environment(
        account=account_id,
        region=site.region,
      ),
      description=f"Static hosting infrastructure for {site.site_name}",
    )

  app.synth()


if __name__ == "__main__":
  main()
