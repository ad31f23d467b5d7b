"""Configuration schema for Polyglot Site using nested Pydantic models."""

import re
from typing import Annotated, ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

LOCALE_PATTERN = re.compile(r"^[a-z]{2}(-[A-Z]{2})?$")


class I18nConfig(BaseModel):
    """Locale configuration shared by the tagger, fan-out and generators."""

    default_locale: str = Field(
        default="en",
        description="Locale served at the untranslated path",
    )
    supported_languages: list[str] = Field(
        default_factory=lambda: ["en"],
        description="Ordered list of locales every page is published in",
    )
    contentful_locale: dict[str, str] = Field(
        default_factory=lambda: {"en": "en-US"},
        description="Mapping from site locale to the CMS-side locale identifier",
    )

    @field_validator("default_locale")
    @classmethod
    def validate_default_locale(cls, v: str) -> str:
        """Validate the default locale code."""
        if not LOCALE_PATTERN.match(v):
            raise ValueError(f"Invalid locale code: {v!r}")
        return v

    @field_validator("supported_languages")
    @classmethod
    def validate_supported_languages(cls, v: list[str]) -> list[str]:
        """Validate locale codes and reject duplicates."""
        seen: set[str] = set()
        for code in v:
            if not LOCALE_PATTERN.match(code):
                raise ValueError(f"Invalid locale code: {code!r}")
            if code in seen:
                raise ValueError(f"Duplicate locale code: {code!r}")
            seen.add(code)
        return v


class ContentConfig(BaseModel):
    """Local content source configuration."""

    content_dir: str = Field(
        default="src/content",
        description="Directory scanned for markdown and MDX files",
    )
    source_root: str = Field(
        default="src/content",
        description="Path marker after which a file's directory becomes its page path",
    )
    extensions: list[str] = Field(
        default_factory=lambda: [".md", ".mdx"],
        description="File extensions treated as content",
    )

    @model_validator(mode="after")
    def validate_source_root(self) -> "ContentConfig":
        """Files under ``content_dir`` must contain ``source_root`` or no page gets a path."""
        source_root = self.source_root.replace("\\", "/").strip("/")
        content_dir = self.content_dir.replace("\\", "/").strip("/")
        if source_root and f"/{source_root}/" not in f"/{content_dir}/":
            raise ValueError(
                f"content.content_dir {self.content_dir!r} does not contain "
                f"content.source_root {self.source_root!r}; set source_root to the "
                "content directory or a part of it"
            )
        return self


class CMSConfig(BaseModel):
    """Headless CMS GraphQL endpoint configuration."""

    url: str | None = Field(
        default=None,
        description="GraphQL endpoint URL; CMS-backed pages are unavailable when unset",
        pattern=r"^https?://.*",
    )
    access_token: str | None = Field(
        default=None,
        description="Bearer token sent with every query",
    )
    timeout: Annotated[float, Field(gt=0, le=600)] = Field(
        default=30.0,
        description="Request timeout in seconds",
    )

    @field_validator("url")
    @classmethod
    def normalize_url(cls, v: str | None) -> str | None:
        """Strip trailing slashes from the endpoint URL."""
        return v.rstrip("/") if v else v


class CatalogConfig(BaseModel):
    """Translation catalog compilation and loading."""

    locale_dir: str = Field(
        default="src/locale",
        description="Root of the <code>/LC_MESSAGES/<domain>.po|.mo tree",
    )
    domain: str = Field(
        default="messages",
        description="gettext domain of the compiled catalogs",
        min_length=1,
    )
    compile_command: list[str] | None = Field(
        default=None,
        description="External compiler argv; the built-in msgfmt compiler runs when unset",
    )

    @field_validator("compile_command")
    @classmethod
    def validate_compile_command(cls, v: list[str] | None) -> list[str] | None:
        """Reject an empty command list."""
        if v is not None and not v:
            raise ValueError("compile_command must not be empty")
        return v


class FeatureFlagsConfig(BaseModel):
    """Which page generators take part in the composite query."""

    docs: bool = Field(default=True, description="Generate documentation pages")
    mdx_pages: bool = Field(default=False, description="Generate standalone MDX pages")
    blog: bool = Field(default=False, description="Generate CMS blog pages")
    newsletter: bool = Field(default=False, description="Generate CMS newsletter pages")
    projects: bool = Field(default=False, description="Generate the project directory")


class BundlerConfig(BaseModel):
    """Bundler settings registered during the webpack-config hook."""

    resolve_modules: list[str] = Field(
        default_factory=lambda: ["node_modules", "src"],
        description="Module resolution roots",
        min_length=1,
    )


class SiteConfig(BaseModel):
    """
    Configuration model for Polyglot Site with nested structure.

    This model defines all configuration options with validation,
    type hints, and default values.
    """

    i18n: I18nConfig = Field(default_factory=I18nConfig)
    content: ContentConfig = Field(default_factory=ContentConfig)
    cms: CMSConfig = Field(default_factory=CMSConfig)
    catalogs: CatalogConfig = Field(default_factory=CatalogConfig)
    features: FeatureFlagsConfig = Field(default_factory=FeatureFlagsConfig)
    bundler: BundlerConfig = Field(default_factory=BundlerConfig)

    model_config: ClassVar[ConfigDict] = ConfigDict(
        str_strip_whitespace=True,
        validate_assignment=True,
        extra="forbid",
        frozen=False,
    )

    @model_validator(mode="after")
    def validate_cms_features(self) -> "SiteConfig":
        """CMS-backed features need an endpoint."""
        needs_cms = [
            name
            for name in ("blog", "newsletter", "projects")
            if getattr(self.features, name)
        ]
        if needs_cms and not self.cms.url:
            raise ValueError(
                f"cms.url is required when these features are enabled: {', '.join(needs_cms)}"
            )
        return self
