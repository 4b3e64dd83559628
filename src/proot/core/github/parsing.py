"""Parsing of gh CLI JSON output into typed pull request records."""

from pydantic import TypeAdapter, ValidationError

from proot.core.github.types import PullRequest

_PR_LIST_ADAPTER = TypeAdapter(list[PullRequest])


class PrListParseError(ValueError):
    """Raised when gh output is not a well-formed array of PR records.

    Attributes:
        location: Dotted location of the first failing field (e.g. "[0].baseRefName"),
            empty when the failure concerns the document as a whole
        reason: Validation message for that location
    """

    def __init__(self, location: str, reason: str) -> None:
        self.location = location
        self.reason = reason
        if location:
            super().__init__(f"{location}: {reason}")
        else:
            super().__init__(reason)


def _format_location(loc: tuple[int | str, ...]) -> str:
    """Format a pydantic error location like ``(0, "baseRefName")`` as ``[0].baseRefName``."""
    parts: list[str] = []
    for item in loc:
        if isinstance(item, int):
            parts.append(f"[{item}]")
        elif parts:
            parts.append(f".{item}")
        else:
            parts.append(item)
    return "".join(parts)


def parse_pr_list(json_text: str) -> list[PullRequest]:
    """Parse the JSON array printed by `gh pr list --json ...`.

    The whole array is rejected if any record fails validation.

    Args:
        json_text: Raw JSON text

    Returns:
        PullRequest records in input order

    Raises:
        PrListParseError: If the JSON is malformed, is not an array of objects,
            or a record lacks a required field or carries a mistyped one
    """
    try:
        return _PR_LIST_ADAPTER.validate_json(json_text)
    except ValidationError as e:
        first = e.errors(include_url=False)[0]
        raise PrListParseError(_format_location(first["loc"]), first["msg"]) from e
