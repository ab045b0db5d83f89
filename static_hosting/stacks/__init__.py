"""CDK stacks for static hosting."""

from .hosting_stack import StaticHostingStack

__all__ = ["StaticHostingStack"]
