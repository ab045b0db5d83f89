"""CDK stack for a single hosted site."""

from typing import Any

import aws_cdk as cdk
from constructs import Construct

from static_hosting.cdk_constructs import StaticHosting
from static_hosting.config import HostingConfig


class StaticHostingStack(cdk.Stack):
  """Stack for a single static site."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    hosting_config: HostingConfig,
    **kwargs: Any,
  ) -> None:
    super().__init__(scope, id, **kwargs)

    self.hosting = StaticHosting(
      self,
      "Hosting",
      domain_name=hosting_config.domain_name,
      sub_domain_name=hosting_config.sub_domain_name,
      certificate_arn=hosting_config.certificate_arn,
      create_dns_record=hosting_config.create_dns_record,
      create_publisher_group=hosting_config.create_publisher_group,
      create_publisher_user=hosting_config.create_publisher_user,
      extra_distribution_cnames=hosting_config.extra_distribution_cnames,
      enable_cloudfront_access_logging=hosting_config.enable_cloudfront_access_logging,
      zone_name=hosting_config.zone_name,
      custom_origin_configs=hosting_config.custom_origin_configs,
      behaviors=hosting_config.behaviors,
    )

    # Tag resources with owner info
    if hosting_config.owner:
      cdk.Tags.of(self).add("Owner", hosting_config.owner)
    if hosting_config.email:
      cdk.Tags.of(self).add("OwnerEmail", hosting_config.email)
    cdk.Tags.of(self).add("Project", "static-hosting")
    cdk.Tags.of(self).add("Domain", hosting_config.site_name)
