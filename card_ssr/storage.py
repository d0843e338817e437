import logging
from dataclasses import dataclass
from pathlib import Path

from card_ssr.exceptions import StartupConfigError
from card_ssr.services.template import HEAD_CLOSE, has_head_marker

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Storage:
    """Static assets loaded once at startup and shared read-only by requests."""

    index_html: str

    @classmethod
    def from_path(cls, path: str | Path) -> "Storage":
        try:
            index_html = Path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise StartupConfigError(f"Cannot read index html at {path}: {exc}") from exc

        if not has_head_marker(index_html):
            logger.warning(
                "Index html at %s has no %s marker, meta tags will not be injected",
                path,
                HEAD_CLOSE,
            )
        return cls(index_html=index_html)
