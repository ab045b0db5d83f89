"""Pytest fixtures for CDK construct tests."""

import aws_cdk as cdk
import pytest

CERTIFICATE_ARN = (
  "arn:aws:acm:us-east-1:123456789012:certificate/11111111-2222-3333-4444-555555555555"
)


@pytest.fixture
def app() -> cdk.App:
  """Create a CDK App for testing."""
  return cdk.App()


@pytest.fixture
def stack(app: cdk.App) -> cdk.Stack:
  """Create a CDK Stack for testing.

  The account is concrete so hosted zone lookups can be declared.
  """
  return cdk.Stack(
    app,
    "TestStack",
    env=cdk.Environment(account="123456789012", region="us-east-1"),
  )


@pytest.fixture
def certificate_arn() -> str:
  return CERTIFICATE_ARN
