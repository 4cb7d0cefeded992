from enum import Enum
from typing import Iterable


class Status(str, Enum):
    """Go/No-Go status of a task, section, or whole report."""

    GO = "GO"
    WARN = "WARN"
    NO_GO = "NO-GO"
    SKIP = "SKIP"

    @property
    def icon(self) -> str:
        return _ICONS[self]

    @property
    def text(self) -> str:
        """Plain word used where emoji are not allowed (PASS, WARNING, FAIL, SKIP)."""
        return _WORDS[self]


_ICONS = {
    Status.GO: "\U0001F7E2",  # 🟢
    Status.WARN: "\U0001F7E1",  # 🟡
    Status.NO_GO: "\U0001F534",  # 🔴
    Status.SKIP: "\u26AA",  # ⚪
}

_WORDS = {
    Status.GO: "PASS",
    Status.WARN: "WARNING",
    Status.NO_GO: "FAIL",
    Status.SKIP: "SKIP",
}

STATUS_ICONS: frozenset[str] = frozenset(_ICONS.values())


def aggregate(children: Iterable[Status]) -> Status:
    """Roll child statuses up into one.

    NO-GO beats WARN beats GO. SKIP is neutral and only wins when every child
    is SKIP, which includes the empty case.
    """
    has_no_go = False
    has_warn = False
    all_skipped = True

    for status in children:
        if status != Status.SKIP:
            all_skipped = False
        if status == Status.NO_GO:
            has_no_go = True
        elif status == Status.WARN:
            has_warn = True

    if has_no_go:
        return Status.NO_GO
    if has_warn:
        return Status.WARN
    if all_skipped:
        return Status.SKIP
    return Status.GO
