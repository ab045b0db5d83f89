"""Tests for the configuration loader."""

import tempfile
from pathlib import Path

import pytest
from aws_cdk import aws_cloudfront as cloudfront

from static_hosting.config import Config, HostingConfig, parse_behavior, parse_custom_origin

CERTIFICATE_ARN = "arn:aws:acm:us-east-1:123456789012:certificate/abc"


def load(yaml_content: str) -> Config:
  with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
    f.write(yaml_content)
    f.flush()

    return Config.from_yaml(Path(f.name))


class TestHostingConfig:
  """Test HostingConfig dataclass."""

  def test_default_values(self) -> None:
    """Verify every optional feature is off by default."""
    config = HostingConfig(
      domain_name="example.com",
      sub_domain_name="www",
      certificate_arn=CERTIFICATE_ARN,
    )

    assert config.site_name == "www.example.com"
    assert config.create_dns_record is False
    assert config.create_publisher_group is False
    assert config.create_publisher_user is False
    assert config.enable_cloudfront_access_logging is False
    assert config.extra_distribution_cnames == []
    assert config.zone_name is None
    assert config.custom_origin_configs == []
    assert config.behaviors == []
    assert config.region == "us-east-1"


class TestConfigFromYaml:
  """Test Config.from_yaml loading."""

  def test_load_simple_config(self) -> None:
    config = load(
      f"""
sites:
  - domain_name: example.com
    sub_domain_name: www
    certificate_arn: {CERTIFICATE_ARN}
"""
    )

    assert len(config.sites) == 1
    site = config.sites[0]
    assert site.domain_name == "example.com"
    assert site.sub_domain_name == "www"
    assert site.certificate_arn == CERTIFICATE_ARN
    assert site.site_name == "www.example.com"

  def test_load_with_defaults(self) -> None:
    config = load(
      f"""
defaults:
  region: us-west-2
  domain_name: example.com
  certificate_arn: {CERTIFICATE_ARN}
  enable_cloudfront_access_logging: true

sites:
  - sub_domain_name: www
  - sub_domain_name: docs
"""
    )

    assert [site.site_name for site in config.sites] == ["www.example.com", "docs.example.com"]
    assert all(site.region == "us-west-2" for site in config.sites)
    assert all(site.enable_cloudfront_access_logging for site in config.sites)

  def test_site_overrides_defaults(self) -> None:
    config = load(
      f"""
defaults:
  create_publisher_group: true

sites:
  - domain_name: example.com
    sub_domain_name: www
    certificate_arn: {CERTIFICATE_ARN}
    create_publisher_group: false
"""
    )

    assert config.sites[0].create_publisher_group is False

  def test_feature_flags_and_dns(self) -> None:
    config = load(
      f"""
sites:
  - domain_name: example.com
    sub_domain_name: www
    certificate_arn: {CERTIFICATE_ARN}
    create_dns_record: true
    zone_name: example.com
    create_publisher_user: true
    create_publisher_group: true
    extra_distribution_cnames:
      - example.com
      - alt.example.com
    owner: Web Team
    email: web@example.com
"""
    )

    site = config.sites[0]
    assert site.create_dns_record is True
    assert site.zone_name == "example.com"
    assert site.create_publisher_user is True
    assert site.create_publisher_group is True
    assert site.extra_distribution_cnames == ["example.com", "alt.example.com"]
    assert site.owner == "Web Team"
    assert site.email == "web@example.com"

  def test_origins_and_behaviors(self) -> None:
    config = load(
      f"""
sites:
  - domain_name: example.com
    sub_domain_name: www
    certificate_arn: {CERTIFICATE_ARN}
    behaviors:
      - is_default_behavior: true
        compress: false
    custom_origin_configs:
      - domain_name: api.example.com
        origin_protocol_policy: https-only
        behaviors:
          - path_pattern: /api/*
"""
    )

    site = config.sites[0]
    assert len(site.behaviors) == 1
    assert site.behaviors[0].is_default_behavior is True
    assert site.behaviors[0].compress is False
    assert len(site.custom_origin_configs) == 1
    origin = site.custom_origin_configs[0]
    assert origin.custom_origin_source.domain_name == "api.example.com"
    assert origin.behaviors[0].path_pattern == "/api/*"

  def test_missing_required_key(self) -> None:
    with pytest.raises(ValueError, match="certificate_arn"):
      load(
        """
sites:
  - domain_name: example.com
    sub_domain_name: www
"""
      )

  def test_empty_file(self) -> None:
    assert load("").sites == []


class TestParseBehavior:
  """Test YAML behavior conversion."""

  def test_full_behavior(self) -> None:
    behavior = parse_behavior(
      {
        "path_pattern": "/assets/*",
        "allowed_methods": "GET-HEAD-OPTIONS",
        "default_ttl_seconds": 3600,
        "min_ttl_seconds": 0,
        "max_ttl_seconds": 86400,
        "forward_query_string": True,
      }
    )

    assert behavior.path_pattern == "/assets/*"
    assert behavior.allowed_methods == cloudfront.CloudFrontAllowedMethods.GET_HEAD_OPTIONS
    assert behavior.default_ttl.to_seconds() == 3600
    assert behavior.min_ttl.to_seconds() == 0
    assert behavior.max_ttl.to_seconds() == 86400
    assert behavior.forwarded_values.query_string is True

  def test_minimal_behavior(self) -> None:
    behavior = parse_behavior({"path_pattern": "/docs/*"})

    assert behavior.path_pattern == "/docs/*"
    assert behavior.allowed_methods is None
    assert behavior.default_ttl is None
    assert behavior.forwarded_values is None

  def test_unknown_allowed_methods(self) -> None:
    with pytest.raises(ValueError, match="allowed_methods"):
      parse_behavior({"allowed_methods": "post-only"})


class TestParseCustomOrigin:
  """Test YAML custom origin conversion."""

  def test_custom_origin(self) -> None:
    origin = parse_custom_origin(
      {
        "domain_name": "api.example.com",
        "origin_path": "/v1",
        "https_port": 8443,
        "origin_protocol_policy": "match-viewer",
        "behaviors": [{"path_pattern": "/api/*"}, {"path_pattern": "/auth/*"}],
      }
    )

    source = origin.custom_origin_source
    assert source.domain_name == "api.example.com"
    assert source.origin_path == "/v1"
    assert source.https_port == 8443
    assert source.origin_protocol_policy == cloudfront.OriginProtocolPolicy.MATCH_VIEWER
    assert [behavior.path_pattern for behavior in origin.behaviors] == ["/api/*", "/auth/*"]

  def test_missing_domain_name(self) -> None:
    with pytest.raises(ValueError, match="domain_name"):
      parse_custom_origin({"behaviors": [{"path_pattern": "/api/*"}]})

  def test_unknown_protocol_policy(self) -> None:
    with pytest.raises(ValueError, match="origin_protocol_policy"):
      parse_custom_origin({"domain_name": "api.example.com", "origin_protocol_policy": "ftp"})
