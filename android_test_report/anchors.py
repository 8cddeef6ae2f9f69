"""Anchor ids and jump links for same-document navigation."""

import logging
import re

log = logging.getLogger(__name__)

PLACEHOLDER_LABEL = "unknown"
BACK_LINK_PREFIX = "back-to-"
SEPARATOR = "-"

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")
_NON_ALPHANUMERIC = re.compile(r"[^a-z0-9]+")


def slug(label: str | None) -> str:
    """Turn an arbitrary label into a lowercase, dash-separated token sequence.

    Camel-case boundaries are split, so ``com.example.MyTestClass`` becomes
    ``com-example-my-test-class``. Labels that are empty, or that contain no
    letters or digits, fall back to a placeholder.
    """
    if label is None or not label.strip():
        log.warning("Empty anchor label, using %r", PLACEHOLDER_LABEL)
        return PLACEHOLDER_LABEL

    split = _CAMEL_BOUNDARY.sub(SEPARATOR, label).lower()
    result = _NON_ALPHANUMERIC.sub(SEPARATOR, split).strip(SEPARATOR)
    if not result:
        log.warning("Anchor label %r has no usable characters", label)
        return PLACEHOLDER_LABEL
    return result


def anchor_id(
    label: str | None, postfix: str | None = None, *, back_link: bool = False
) -> str:
    """Build the id of an anchor for ``label``.

    Args:
        label: Human-readable label, e.g. a test class name
        postfix: Purpose of the anchor ("failures" or "skipped")
        back_link: Whether this is the id a detail section links back to

    Returns:
        Anchor id such as ``back-to-com-example-foo-failures``

    """
    result = slug(label)
    if postfix:
        result = f"{result}{SEPARATOR}{postfix}"
    if back_link:
        result = f"{BACK_LINK_PREFIX}{result}"
    return result


def jump_link(label: str | None, postfix: str | None = None) -> str:
    """Fragment reference to the forward anchor of ``label``."""
    return f"#{anchor_id(label, postfix)}"
