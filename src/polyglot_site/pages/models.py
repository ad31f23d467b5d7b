"""Page descriptors handed between generators, hooks and the page registry."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Page:
    """A page to be emitted by the build.

    ``context`` is passed through to the page component untouched; only
    ``locale`` and the keys added by locale fan-out have meaning here.
    """

    path: str
    component: str
    context: dict[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate the route shape and the locale type."""
        if not self.path.startswith("/"):
            raise ValueError(f"Page path must start with '/': {self.path!r}")
        locale = self.context.get("locale")
        if locale is not None and not isinstance(locale, str):
            raise TypeError(
                f"Page locale must be a string, got {type(locale).__name__} on {self.path}"
            )

    @property
    def locale(self) -> str | None:
        """The page's locale, or None if it has not been localized yet."""
        value = self.context.get("locale")
        return value if isinstance(value, str) and value else None

    def to_dict(self) -> dict[str, object]:
        """Serializable form used by the build manifest."""
        return {
            "path": self.path,
            "component": self.component,
            "context": dict(self.context),
        }
