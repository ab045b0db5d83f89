"""CDK constructs for static site hosting."""

from .distribution import CloudFrontDistribution, build_origin_configs
from .dns import SiteAliasRecord
from .invalidation import InvalidationPolicy
from .publisher import Publisher
from .static_hosting import StaticHosting, site_hostname
from .storage import AccessLogBucket, StorageBucket

__all__ = [
  "AccessLogBucket",
  "CloudFrontDistribution",
  "InvalidationPolicy",
  "Publisher",
  "SiteAliasRecord",
  "StaticHosting",
  "StorageBucket",
  "build_origin_configs",
  "site_hostname",
]
