"""Column arithmetic for fixed-width terminal output.

Terminals draw most emoji two columns wide, so counting codepoints would
under-pad any line carrying a status icon and push the right border out.
"""

ELLIPSIS = "..."

# Codepoint ranges drawn two columns wide.
_WIDE_RANGES = (
    (0x1F300, 0x1FAFF),  # pictographs, emoticons, transport, supplemental symbols
    (0x2600, 0x27BF),  # misc symbols and dingbats
)


def char_width(ch: str) -> int:
    cp = ord(ch)
    for lo, hi in _WIDE_RANGES:
        if lo <= cp <= hi:
            return 2
    return 1


def visual_width(text: str) -> int:
    return sum(char_width(ch) for ch in text)


def truncate(text: str, limit: int) -> str:
    """Cut ``text`` to at most ``limit`` columns, ending in an ellipsis when cut."""
    if visual_width(text) <= limit:
        return text
    if limit <= len(ELLIPSIS):
        return ELLIPSIS[: max(limit, 0)]

    budget = limit - len(ELLIPSIS)
    used = 0
    kept: list[str] = []
    for ch in text:
        w = char_width(ch)
        if used + w > budget:
            break
        kept.append(ch)
        used += w
    return "".join(kept) + ELLIPSIS


def pad_right(text: str, width: int) -> str:
    return text + " " * max(0, width - visual_width(text))


def one_line(text: str) -> str:
    """Collapse whitespace, newlines included, to single spaces."""
    return " ".join(text.split())


def single_line(text: str) -> str:
    """Join the lines of ``text`` with spaces, keeping its leading indent."""
    return " ".join(text.replace("\t", " ").splitlines())


def wrap_text(text: str, width: int) -> list[str]:
    """Greedy word wrap.

    Newlines in ``text`` start a new paragraph; blank lines are kept. A word
    wider than ``width`` gets a line of its own and is never split.
    """
    lines: list[str] = []
    for paragraph in text.split("\n"):
        words = paragraph.split()
        if not words:
            lines.append("")
            continue
        current = words[0]
        for word in words[1:]:
            if visual_width(current) + 1 + visual_width(word) <= width:
                current = f"{current} {word}"
            else:
                lines.append(current)
                current = word
        lines.append(current)
    return lines
