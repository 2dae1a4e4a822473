"""Link Post-Processor - Resolves internal-link placeholders.

Generated text marks internal links as ``<!-- LINK_INTERNO: [42] -->``
(brackets and inner whitespace optional). Each marker becomes an anchor to
the registry post with that id. Markers whose id is not in the registry are
removed; the dropped ids are logged.
"""

import logging
import re
from typing import Iterable

from genesis.integrations.wordpress_client import PostReference

logger = logging.getLogger(__name__)

PLACEHOLDER_PATTERN = re.compile(r"<!--\s*LINK_INTERNO:\s*\[?(\d+)\]?\s*-->")

ANCHOR_TEMPLATE = '<a href="{link}" class="internal-link" target="_blank">{title}</a>'


def find_placeholder_ids(text: str) -> list[int]:
    """Ids referenced by placeholders, in order of appearance.

    Examples:
        >>> find_placeholder_ids("a <!-- LINK_INTERNO: [4] --> b <!--LINK_INTERNO:7-->")
        [4, 7]
    """
    return [int(match) for match in PLACEHOLDER_PATTERN.findall(text or "")]


def resolve_internal_links(text: str, post_registry: Iterable[PostReference]) -> str:
    """Replace every placeholder with an anchor to the matching post.

    Args:
        text: Generated article text
        post_registry: Known posts

    Returns:
        Text with placeholders resolved; unknown ids become "".

    Examples:
        >>> posts = [PostReference(42, "Moagem", "https://blog/moagem")]
        >>> resolve_internal_links("Veja <!-- LINK_INTERNO: [42] -->", posts)
        'Veja <a href="https://blog/moagem" class="internal-link" target="_blank">Moagem</a>'
        >>> resolve_internal_links("Veja <!-- LINK_INTERNO: [9] -->", posts)
        'Veja '
    """
    if not text:
        return ""

    posts_by_id = {post.id: post for post in post_registry}
    dropped: list[int] = []

    def _replace(match: re.Match) -> str:
        post_id = int(match.group(1))
        post = posts_by_id.get(post_id)
        if post is None:
            dropped.append(post_id)
            return ""
        return ANCHOR_TEMPLATE.format(link=post.link, title=post.title)

    resolved = PLACEHOLDER_PATTERN.sub(_replace, text)

    if dropped:
        logger.warning(
            "Dropped %d internal link placeholder(s) with unknown ids: %s",
            len(dropped),
            dropped,
        )

    return resolved
