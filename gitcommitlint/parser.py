"""Parse raw commit text into a Message."""
import re
from typing import Dict, List, Optional

from .models import Message

SCISSORS_LINE = "# ------------------------ >8 ------------------------"

HEADER_REGEX = re.compile(
    r"^(?P<type>[\w-]+)(?:\((?P<scope>[^()\r\n]*)\))?!?: (?P<description>.*)$"
)
FOOTER_REGEX = re.compile(r"^(?P<token>BREAKING[ -]CHANGE|[\w-]+)(?:: | #)(?P<value>.*)$")


def _strip_scissors(text: str) -> str:
    """Drop everything from git's verbose-mode scissors line onward."""
    lines = text.split("\n")
    for index, line in enumerate(lines):
        if line.rstrip("\r") == SCISSORS_LINE:
            return "\n".join(lines[:index])
    return text


def _parse_footers(body: str) -> Optional[Dict[str, str]]:
    """Read trailers from the last paragraph of the body, if it only holds trailers."""
    paragraphs = re.split(r"\n\s*\n", body.strip())
    last: List[str] = paragraphs[-1].splitlines() if paragraphs else []
    footers: Dict[str, str] = {}
    for line in last:
        match = FOOTER_REGEX.match(line)
        if not match:
            return None
        token = match.group("token")
        if token == "BREAKING-CHANGE":
            token = "BREAKING CHANGE"
        footers[token] = match.group("value").strip()
    return footers or None


def parse_message(raw: str) -> Message:
    """Parse a commit message.

    The first line is the subject. Anything after it, minus leading blank
    lines, is the body. Conventional commit headers additionally fill in
    type, scope and description.

    The returned message's ``raw`` is the normalized text every other
    field is read from: anything from git's scissors line onward is
    dropped, along with leading blank lines and trailing whitespace.

    Args:
        raw: Commit message text as written by git

    Returns:
        Message: The parsed message

    Raises:
        ValueError: If the message is empty
    """
    text = _strip_scissors(raw).rstrip().lstrip("\r\n")
    if not text.strip():
        raise ValueError("Empty commit message")

    subject, _, rest = text.partition("\n")
    subject = subject.rstrip("\r")
    body = rest.lstrip("\r\n") or None

    commit_type = scope = description = None
    header = HEADER_REGEX.match(subject)
    if header:
        commit_type = header.group("type")
        scope = header.group("scope") or None
        description = header.group("description").strip() or None

    return Message(
        raw=text,
        subject=subject,
        body=body,
        description=description,
        type=commit_type,
        scope=scope,
        footers=_parse_footers(body) if body else None,
    )
