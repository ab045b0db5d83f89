"""Private S3 buckets for site content and CloudFront access logs."""

from aws_cdk import RemovalPolicy
from aws_cdk import aws_s3 as s3
from constructs import Construct


class StorageBucket(Construct):
  """S3 bucket with S3-managed encryption and all public access blocked.

  The bucket is never reachable directly; CloudFront reads it through an
  Origin Access Identity.
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    bucket_name: str,
    removal_policy: RemovalPolicy | None = None,
    object_ownership: s3.ObjectOwnership | None = None,
  ) -> None:
    super().__init__(scope, id)

    self.bucket = s3.Bucket(
      self,
      "Bucket",
      bucket_name=bucket_name,
      encryption=s3.BucketEncryption.S3_MANAGED,
      block_public_access=s3.BlockPublicAccess.BLOCK_ALL,
      removal_policy=removal_policy,
      object_ownership=object_ownership,
    )


class AccessLogBucket(StorageBucket):
  """Append-only bucket for CloudFront access logs, kept on stack teardown."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    site_name: str,
  ) -> None:
    super().__init__(
      scope,
      id,
      bucket_name=f"{site_name}-access-logs",
      removal_policy=RemovalPolicy.RETAIN,
      # CloudFront log delivery writes objects with ACLs
      object_ownership=s3.ObjectOwnership.OBJECT_WRITER,
    )
