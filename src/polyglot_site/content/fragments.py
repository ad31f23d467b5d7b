"""
Query fragments for the composite page query.

Each page generator contributes one fragment. ``docs`` and ``mdxPages`` are
answered from local content; everything else is sent to the CMS.
"""

from __future__ import annotations

from ..config.schema import FeatureFlagsConfig

DOCS_FRAGMENT = """
docs: allMdx(filter: {fields: {path: {regex: "/^\\\\/docs/"}}}) {
  edges {
    node {
      id
      fileAbsolutePath
      fields { locale path }
      frontmatter { title slug }
    }
  }
}
"""

MDX_PAGES_FRAGMENT = """
mdxPages: allMdx(filter: {fields: {path: {ne: null}}}) {
  edges {
    node {
      id
      fileAbsolutePath
      fields { locale path }
      frontmatter { title slug }
    }
  }
}
"""

BLOG_FRAGMENT = """
allContentfulBlogPost {
  edges {
    node {
      title
      slug
      category
      updatedAt
    }
  }
}
"""

NEWSLETTER_FRAGMENT = """
allContentfulNewsletter {
  edges {
    node {
      slug
    }
  }
}
"""

PROJECTS_FRAGMENT = """
allContentfulProject {
  totalCount
}
allContentfulProjectCategory: allContentfulProject {
  group(field: category) {
    fieldValue
    totalCount
  }
}
"""

LOCAL_FRAGMENTS: dict[str, str] = {
    "docs": DOCS_FRAGMENT,
    "mdxPages": MDX_PAGES_FRAGMENT,
}


def enabled_fragments(features: FeatureFlagsConfig) -> list[str]:
    """Fragments of every enabled generator, in dispatch order."""
    fragments: list[str] = []
    if features.mdx_pages:
        fragments.append(MDX_PAGES_FRAGMENT)
    if features.blog:
        fragments.append(BLOG_FRAGMENT)
    if features.newsletter:
        fragments.append(NEWSLETTER_FRAGMENT)
    if features.projects:
        fragments.append(PROJECTS_FRAGMENT)
    if features.docs:
        fragments.append(DOCS_FRAGMENT)
    return fragments


def build_query(fragments: list[str]) -> str:
    """Wrap fragments in a single anonymous query."""
    return "{\n" + "".join(fragments) + "}\n"


def build_page_query(features: FeatureFlagsConfig) -> str:
    return build_query(enabled_fragments(features))
