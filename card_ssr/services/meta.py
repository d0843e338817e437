"""OpenGraph and Twitter card meta tags for a card."""

from html import escape

from card_ssr.config import Settings
from card_ssr.schemas import Card


def escape_meta(prop: str, content: str) -> str:
    """Render a single ``<meta property=... content=... />`` tag."""
    return '<meta property="{}" content="{}" />'.format(
        escape(prop, quote=True), escape(content, quote=True)
    )


def build_meta_tags(settings: Settings, card: Card) -> list[str]:
    image = settings.image_src(card.preview_url) if card.preview_url else None

    tags = [
        escape_meta("title", card.title),
        escape_meta("description", card.description),
        escape_meta("og:site_name", settings.sitename),
        escape_meta("og:type", "article"),
        escape_meta("og:title", card.title),
        escape_meta("og:description", card.description),
        escape_meta("og:url", settings.card_page_url(card.id)),
    ]
    if image:
        tags.append(escape_meta("og:image", image))
    tags += [
        escape_meta("article:published_time", card.created_at),
        escape_meta("article:modified_time", card.updated_at),
        escape_meta(
            "twitter:card", "summary_large_image" if image else "summary"
        ),
        escape_meta("twitter:site", settings.twitter_site),
        escape_meta("twitter:title", card.title),
        escape_meta("twitter:description", card.description),
    ]
    if image:
        tags.append(escape_meta("twitter:image", image))
    return tags


def meta_for_card(settings: Settings, card: Card) -> str:
    """Meta tags for ``card`` joined into one newline separated fragment."""
    return "\n".join(build_meta_tags(settings, card))
