"""Configuration loader for static hosting sites."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from aws_cdk import Duration
from aws_cdk import aws_cloudfront as cloudfront

from static_hosting.cdk_constructs.static_hosting import site_hostname

ORIGIN_PROTOCOL_POLICIES = {
  "http-only": cloudfront.OriginProtocolPolicy.HTTP_ONLY,
  "https-only": cloudfront.OriginProtocolPolicy.HTTPS_ONLY,
  "match-viewer": cloudfront.OriginProtocolPolicy.MATCH_VIEWER,
}

ALLOWED_METHODS = {
  "get-head": cloudfront.CloudFrontAllowedMethods.GET_HEAD,
  "get-head-options": cloudfront.CloudFrontAllowedMethods.GET_HEAD_OPTIONS,
  "all": cloudfront.CloudFrontAllowedMethods.ALL,
}

REQUIRED_SITE_KEYS = ("domain_name", "sub_domain_name", "certificate_arn")


@dataclass
class HostingConfig:
  """Configuration for a single hosted site."""

  domain_name: str
  sub_domain_name: str
  certificate_arn: str
  create_dns_record: bool = False
  create_publisher_group: bool = False
  create_publisher_user: bool = False
  extra_distribution_cnames: list[str] = field(default_factory=list)
  enable_cloudfront_access_logging: bool = False
  zone_name: str | None = None
  custom_origin_configs: list[cloudfront.SourceConfiguration] = field(default_factory=list)
  behaviors: list[cloudfront.Behavior] = field(default_factory=list)
  owner: str = ""
  email: str = ""
  region: str = "us-east-1"

  @property
  def site_name(self) -> str:
    return site_hostname(self.sub_domain_name, self.domain_name)


@dataclass
class Config:
  """Multi-site configuration."""

  sites: list[HostingConfig] = field(default_factory=list)

  @classmethod
  def from_yaml(cls, path: Path | str = "sites.yaml") -> "Config":
    """Load configuration from YAML file."""
    with open(path) as f:
      data = yaml.safe_load(f) or {}

    defaults = data.get("defaults", {})
    sites: list[HostingConfig] = []

    for site_data in data.get("sites", []):
      # Merge defaults with site-specific config
      merged = {**defaults, **site_data}

      missing = [key for key in REQUIRED_SITE_KEYS if not merged.get(key)]
      if missing:
        raise ValueError(f"Site config is missing required keys: {', '.join(missing)}")

      sites.append(
        HostingConfig(
          domain_name=merged["domain_name"],
          sub_domain_name=merged["sub_domain_name"],
          certificate_arn=merged["certificate_arn"],
          create_dns_record=merged.get("create_dns_record", False),
          create_publisher_group=merged.get("create_publisher_group", False),
          create_publisher_user=merged.get("create_publisher_user", False),
          extra_distribution_cnames=list(merged.get("extra_distribution_cnames") or []),
          enable_cloudfront_access_logging=merged.get(
            "enable_cloudfront_access_logging", False
          ),
          zone_name=merged.get("zone_name"),
          custom_origin_configs=[
            parse_custom_origin(origin) for origin in merged.get("custom_origin_configs") or []
          ],
          behaviors=[parse_behavior(behavior) for behavior in merged.get("behaviors") or []],
          owner=merged.get("owner", ""),
          email=merged.get("email", ""),
          region=merged.get("region", "us-east-1"),
        )
      )

    return cls(sites=sites)


def _lookup(table: dict[str, Any], value: str, kind: str) -> Any:
  try:
    return table[value.lower()]
  except KeyError:
    choices = ", ".join(sorted(table))
    raise ValueError(f"Unknown {kind} {value!r} (expected one of: {choices})") from None


def _seconds(data: dict[str, Any], key: str) -> Duration | None:
  return Duration.seconds(data[key]) if key in data else None


def parse_behavior(data: dict[str, Any]) -> cloudfront.Behavior:
  """Convert a YAML behavior mapping into a CloudFront behavior."""
  allowed_methods = data.get("allowed_methods")

  return cloudfront.Behavior(
    path_pattern=data.get("path_pattern"),
    is_default_behavior=data.get("is_default_behavior"),
    compress=data.get("compress"),
    allowed_methods=(
      _lookup(ALLOWED_METHODS, allowed_methods, "allowed_methods") if allowed_methods else None
    ),
    default_ttl=_seconds(data, "default_ttl_seconds"),
    min_ttl=_seconds(data, "min_ttl_seconds"),
    max_ttl=_seconds(data, "max_ttl_seconds"),
    forwarded_values=(
      cloudfront.CfnDistribution.ForwardedValuesProperty(
        query_string=data["forward_query_string"]
      )
      if "forward_query_string" in data
      else None
    ),
  )


def parse_custom_origin(data: dict[str, Any]) -> cloudfront.SourceConfiguration:
  """Convert a YAML custom origin mapping into a CloudFront source configuration."""
  if not data.get("domain_name"):
    raise ValueError("Custom origin is missing required key: domain_name")

  protocol_policy = data.get("origin_protocol_policy")

  return cloudfront.SourceConfiguration(
    custom_origin_source=cloudfront.CustomOriginConfig(
      domain_name=data["domain_name"],
      origin_path=data.get("origin_path"),
      http_port=data.get("http_port"),
      https_port=data.get("https_port"),
      origin_protocol_policy=(
        _lookup(ORIGIN_PROTOCOL_POLICIES, protocol_policy, "origin_protocol_policy")
        if protocol_policy
        else None
      ),
    ),
    behaviors=[parse_behavior(behavior) for behavior in data.get("behaviors") or []],
  )
