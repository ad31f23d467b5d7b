"""Page generators routed from the composite page query."""

from .blog import create_contentful_blog, create_contentful_pages
from .common import GeneratorContext
from .docs import create_docs_pages
from .mdx import create_mdx_pages
from .newsletter import create_contentful_newsletter
from .projects import create_project_directory

__all__ = [
    "GeneratorContext",
    "create_contentful_blog",
    "create_contentful_newsletter",
    "create_contentful_pages",
    "create_docs_pages",
    "create_mdx_pages",
    "create_project_directory",
]
