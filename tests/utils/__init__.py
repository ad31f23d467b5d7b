"""
Test utilities package for Polyglot Site tests.

### test_helpers.py
- `create_temp_config_file()`: Context manager for temporary YAML config files
- `make_page()`: Build a page descriptor with defaults
- `pages_by_locale()`: Index created pages by their locale
- `write_content_file()`: Write a markdown/MDX file with front matter
- `graphql_returning()`: Fake ``graphql`` callable recording its queries
"""

from .test_helpers import (
    create_temp_config_file,
    graphql_returning,
    make_page,
    pages_by_locale,
    write_content_file,
)

__all__ = [
    "create_temp_config_file",
    "graphql_returning",
    "make_page",
    "pages_by_locale",
    "write_content_file",
]
