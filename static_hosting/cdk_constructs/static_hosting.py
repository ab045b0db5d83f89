"""Composite construct for hosting a static site behind CloudFront."""

from collections.abc import Sequence

from aws_cdk import Annotations, CfnOutput
from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_iam as iam
from aws_cdk import aws_route53 as route53
from aws_cdk import aws_s3 as s3
from constructs import Construct

from .distribution import CloudFrontDistribution, build_origin_configs
from .dns import SiteAliasRecord
from .invalidation import InvalidationPolicy
from .publisher import Publisher
from .storage import AccessLogBucket, StorageBucket


def site_hostname(sub_domain_name: str, domain_name: str) -> str:
  """Canonical hostname of a site, e.g. ``www.example.com``."""
  return f"{sub_domain_name}.{domain_name}"


class StaticHosting(Construct):
  """Static site hosting on S3 and CloudFront.

  Creates:
  - Private, encrypted S3 bucket named after the site hostname
  - Origin Access Identity with read access to the bucket
  - CloudFront distribution with the site hostname as its first alias
  - (Optional) Publisher IAM user
  - (Optional) Publisher IAM group with bucket read/write and cache
    invalidation rights on this distribution only
  - (Optional) Retained S3 bucket for CloudFront access logs
  - (Optional) Route 53 A record in an existing hosted zone
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    domain_name: str,
    sub_domain_name: str,
    certificate_arn: str,
    create_dns_record: bool = False,
    create_publisher_group: bool = False,
    create_publisher_user: bool = False,
    extra_distribution_cnames: Sequence[str] | None = None,
    enable_cloudfront_access_logging: bool = False,
    zone_name: str | None = None,
    custom_origin_configs: Sequence[cloudfront.SourceConfiguration] | None = None,
    behaviors: Sequence[cloudfront.Behavior] | None = None,
  ) -> None:
    super().__init__(scope, id)

    self.site_name = site_hostname(sub_domain_name, domain_name)
    self.distribution_cnames = [self.site_name]
    if extra_distribution_cnames:
      self.distribution_cnames.extend(extra_distribution_cnames)

    # Content
    self.bucket: s3.Bucket = StorageBucket(
      self,
      "ContentBucket",
      bucket_name=self.site_name,
    ).bucket

    CfnOutput(
      self,
      "Bucket",
      value=self.bucket.bucket_name,
      description="BucketName",
    )

    self.origin_access_identity = cloudfront.OriginAccessIdentity(
      self,
      "OriginAccessIdentity",
      comment="Allow CloudFront to access S3",
    )
    self.bucket.grant_read(self.origin_access_identity)

    # Publishers
    publisher = Publisher(
      self,
      "Publisher",
      bucket=self.bucket,
      site_name=self.site_name,
      create_user=create_publisher_user,
      create_group=create_publisher_group,
    )
    self.publisher_user: iam.User | None = publisher.user
    self.publisher_group: iam.Group | None = publisher.group

    if self.publisher_user is not None:
      CfnOutput(
        self,
        "PublisherUserName",
        value=self.publisher_user.user_name,
        description="PublisherUser",
      )

    if self.publisher_group is not None:
      CfnOutput(
        self,
        "PublisherGroupName",
        value=self.publisher_group.group_name,
        description="PublisherGroup",
      )

    # Access logs
    self.logging_bucket: s3.Bucket | None = None
    if enable_cloudfront_access_logging:
      self.logging_bucket = AccessLogBucket(
        self,
        "LoggingBucket",
        site_name=self.site_name,
      ).bucket
      self.logging_bucket.grant_write(self.origin_access_identity)

      CfnOutput(
        self,
        "LoggingBucketName",
        value=self.logging_bucket.bucket_name,
        description="CloudFront Logs",
      )

    # CloudFront
    self.origin_configs = build_origin_configs(
      bucket=self.bucket,
      origin_access_identity=self.origin_access_identity,
      behaviors=behaviors,
      custom_origin_configs=custom_origin_configs,
    )

    self.distribution: cloudfront.CloudFrontWebDistribution = CloudFrontDistribution(
      self,
      "Distribution",
      origin_configs=self.origin_configs,
      certificate_arn=certificate_arn,
      aliases=self.distribution_cnames,
      logging_bucket=self.logging_bucket,
    ).distribution

    self.invalidation_policy: iam.Policy | None = None
    if self.publisher_group is not None:
      self.invalidation_policy = InvalidationPolicy(
        self,
        "Invalidation",
        group=self.publisher_group,
        distribution=self.distribution,
      ).policy

    CfnOutput(
      self,
      "DistributionId",
      value=self.distribution.distribution_id,
      description="DistributionId",
    )
    CfnOutput(
      self,
      "DistributionDomainName",
      value=self.distribution.distribution_domain_name,
      description="DistributionDomainName",
    )

    # DNS
    self.alias_record: route53.ARecord | None = None
    if create_dns_record and zone_name:
      self.alias_record = SiteAliasRecord(
        self,
        "Dns",
        zone_name=zone_name,
        record_name=self.site_name,
        distribution=self.distribution,
      ).record
    elif create_dns_record:
      Annotations.of(self).add_warning_v2(
        "static-hosting:dnsRecordSkipped",
        f"create_dns_record is set but zone_name is empty; no DNS record "
        f"will be created for {self.site_name}",
      )
