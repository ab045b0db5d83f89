"""CloudFront distribution for a private S3 content bucket."""

from collections.abc import Sequence

from aws_cdk import aws_certificatemanager as acm
from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_s3 as s3
from constructs import Construct


def default_behaviors() -> list[cloudfront.Behavior]:
  """Single catch-all behavior serving everything from the bucket."""
  return [cloudfront.Behavior(is_default_behavior=True)]


def build_origin_configs(
  *,
  bucket: s3.IBucket,
  origin_access_identity: cloudfront.IOriginAccessIdentity,
  behaviors: Sequence[cloudfront.Behavior] | None = None,
  custom_origin_configs: Sequence[cloudfront.SourceConfiguration] | None = None,
) -> list[cloudfront.SourceConfiguration]:
  """Bucket origin first, then any custom origins in caller order.

  A non-empty ``behaviors`` list replaces the default behavior on the
  bucket origin wholesale.
  """
  origin_configs = [
    cloudfront.SourceConfiguration(
      s3_origin_source=cloudfront.S3OriginConfig(
        s3_bucket_source=bucket,
        origin_access_identity=origin_access_identity,
      ),
      behaviors=list(behaviors) if behaviors else default_behaviors(),
    )
  ]

  if custom_origin_configs:
    origin_configs.extend(custom_origin_configs)

  return origin_configs


class CloudFrontDistribution(Construct):
  """CloudFront distribution with HTTPS aliases and SPA-style 404 handling.

  Missing paths are served ``/index.html`` with a 200 so client-side
  routing works; insecure requests are redirected to HTTPS.
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    origin_configs: Sequence[cloudfront.SourceConfiguration],
    certificate_arn: str,
    aliases: Sequence[str],
    logging_bucket: s3.IBucket | None = None,
  ) -> None:
    super().__init__(scope, id)

    certificate = acm.Certificate.from_certificate_arn(
      self,
      "Certificate",
      certificate_arn,
    )

    logging_config = (
      cloudfront.LoggingConfiguration(bucket=logging_bucket) if logging_bucket else None
    )

    self.distribution = cloudfront.CloudFrontWebDistribution(
      self,
      "BucketCdn",
      viewer_certificate=cloudfront.ViewerCertificate.from_acm_certificate(
        certificate,
        aliases=list(aliases),
        security_policy=cloudfront.SecurityPolicyProtocol.TLS_V1_2_2018,
        ssl_method=cloudfront.SSLMethod.SNI,
      ),
      origin_configs=list(origin_configs),
      error_configurations=[
        cloudfront.CfnDistribution.CustomErrorResponseProperty(
          error_code=404,
          error_caching_min_ttl=0,
          response_code=200,
          response_page_path="/index.html",
        )
      ],
      price_class=cloudfront.PriceClass.PRICE_CLASS_ALL,
      viewer_protocol_policy=cloudfront.ViewerProtocolPolicy.REDIRECT_TO_HTTPS,
      logging_config=logging_config,
    )
