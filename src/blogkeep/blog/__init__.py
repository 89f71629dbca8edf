"""Blog domain -- the post collection service and its export publishers."""

from blogkeep.blog.publishers import BlogPublisher, ExportFormat, create_publisher
from blogkeep.blog.services import BlogService

__all__ = [
    "BlogPublisher",
    "BlogService",
    "ExportFormat",
    "create_publisher",
]
