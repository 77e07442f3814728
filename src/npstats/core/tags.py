"""Hashtag and @mention(n) extraction - no I/O dependencies.

Unlike task counting, extraction ignores #template sections and scans the
whole text.
"""

import re
from decimal import Decimal

HASHTAG_RE = re.compile(r"#[\w/]+")
MENTION_RE = re.compile(r"@\w+\(\d+(?:\.\d+)?\)")


def extract_hashtags(text: str) -> list[str]:
    """All hashtags in order of appearance, repeats included."""
    return HASHTAG_RE.findall(text)


def extract_mentions(text: str) -> list[str]:
    """All @name(number) mentions in order of appearance, repeats included."""
    return MENTION_RE.findall(text)


def count_tag(hashtags: list[str], tag: str) -> int:
    """Case-insensitive count of a configured tag among extracted hashtags."""
    wanted = tag.lower()
    if not wanted.startswith("#"):
        wanted = "#" + wanted
    return sum(1 for t in hashtags if t.lower() == wanted)


def mention_values(mentions: list[str], name: str) -> list[Decimal]:
    """Numeric arguments of every mention matching name, case-insensitively."""
    if not name.startswith("@"):
        name = "@" + name
    pattern = re.compile(re.escape(name) + r"\((\d+(?:\.\d+)?)\)", re.IGNORECASE)
    values = []
    for mention in mentions:
        match = pattern.fullmatch(mention)
        if match:
            values.append(Decimal(match.group(1)))
    return values
