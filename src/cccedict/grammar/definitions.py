"""Splitter for the slash-delimited definitions block."""

from __future__ import annotations

from cccedict.errors import CedictEntryError


def split_definitions(text: str) -> tuple[tuple[str, ...] | None, str]:
    """Split ``/def1/def2/.../`` into trimmed definitions.

    The block ends at the last ``/`` in ``text``, so an inline ``# comment``
    after the block is left over as the remainder. A ``/`` inside that comment
    would be taken as the closing delimiter; the format has no escaping.

    Args:
        text: Rest of the line after the pronunciation blocks.

    Returns:
        ``(definitions, remainder)``. ``definitions`` is ``None`` when the
        block is exactly ``//`` or when ``text`` has no slash at all. Pieces
        that are blank after trimming are kept as empty strings.

    Raises:
        CedictEntryError: If the text before the last slash is not a
            slash-delimited list.
    """

    last_slash = text.rfind("/")
    if last_slash == -1:
        return None, text

    block, remainder = text[: last_slash + 1], text[last_slash + 1 :]
    if len(block) < 2 or not block.startswith("/"):
        raise CedictEntryError(text)

    interior = block[1:-1]
    if not interior:
        return None, remainder
    return tuple(part.strip() for part in interior.split("/")), remainder
