"""CloudFront cache invalidation permissions for publishers."""

from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_iam as iam
from constructs import Construct

INVALIDATION_ACTIONS = [
  "cloudfront:CreateInvalidation",
  "cloudfront:GetInvalidation",
  "cloudfront:ListInvalidations",
]


def invalidation_statement(distribution: cloudfront.IDistribution) -> iam.PolicyStatement:
  """Allow invalidation actions on exactly one distribution."""
  return iam.PolicyStatement(
    effect=iam.Effect.ALLOW,
    actions=INVALIDATION_ACTIONS,
    resources=[f"arn:aws:cloudfront::*:distribution/{distribution.distribution_id}"],
  )


class InvalidationPolicy(Construct):
  """IAM policy letting a group invalidate the site's CloudFront cache."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    group: iam.IGroup,
    distribution: cloudfront.IDistribution,
  ) -> None:
    super().__init__(scope, id)

    self.policy = iam.Policy(
      self,
      "CloudFrontInvalidationPolicy",
      groups=[group],
      statements=[invalidation_statement(distribution)],
    )
