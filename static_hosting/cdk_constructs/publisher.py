"""IAM identities allowed to publish site content."""

from aws_cdk import aws_iam as iam
from aws_cdk import aws_s3 as s3
from constructs import Construct


class Publisher(Construct):
  """Optional publisher user and group for a site's content bucket.

  The group is the permission boundary: it gets read/write on the bucket
  and (later, once the distribution exists) cache invalidation rights. The
  user has no permissions of its own beyond group membership.
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    bucket: s3.IBucket,
    site_name: str,
    create_user: bool = False,
    create_group: bool = False,
  ) -> None:
    super().__init__(scope, id)

    self.user: iam.User | None = None
    self.group: iam.Group | None = None

    if create_user:
      self.user = iam.User(
        self,
        "PublisherUser",
        user_name=f"publisher-{site_name}",
      )

    if create_group:
      self.group = iam.Group(self, "PublisherGroup")
      bucket.grant_read_write(self.group)

      # Sole initial member; a bare group is left for manual membership
      if self.user is not None:
        self.group.add_user(self.user)
