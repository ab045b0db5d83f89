"""Route 53 alias record for the site hostname."""

from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_route53 as route53
from aws_cdk import aws_route53_targets as targets
from constructs import Construct


class SiteAliasRecord(Construct):
  """A record in an existing hosted zone pointing at a CloudFront distribution.

  The zone is found with a context lookup, so the enclosing stack needs a
  concrete account and region.
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    zone_name: str,
    record_name: str,
    distribution: cloudfront.IDistribution,
  ) -> None:
    super().__init__(scope, id)

    self.hosted_zone = route53.HostedZone.from_lookup(
      self,
      "Zone",
      domain_name=zone_name,
    )

    self.record = route53.ARecord(
      self,
      "SiteAliasRecord",
      zone=self.hosted_zone,
      record_name=record_name,
      target=route53.RecordTarget.from_alias(targets.CloudFrontTarget(distribution)),
    )
