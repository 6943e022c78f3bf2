# src/design_review/review/truncation.py
TRUNCATION_SUFFIX = "\n... (truncated)"

# Preferred cut points, best first
TRUNCATE_POINTS = ("\n\n", "\n}", "\n]", "\n")

# A boundary is only used if it keeps more than this share of the budget
MIN_KEEP_RATIO = 0.8


def smart_truncate(content: str, max_length: int) -> str:
    """Shorten content to max_length characters, preferring a structural boundary.

    Looks backward from max_length for a blank line, then a closing brace or
    bracket at line start, then any newline. The first boundary found past
    80% of the budget wins; otherwise the text is cut at exactly max_length.
    The truncation suffix is appended whenever anything was removed.
    """
    if len(content) <= max_length:
        return content

    max_length = max(max_length, 0)
    for point in TRUNCATE_POINTS:
        # rfind end bound lets a marker start at max_length itself
        last_index = content.rfind(point, 0, max_length + len(point))
        if last_index > max_length * MIN_KEEP_RATIO:
            return content[:last_index] + TRUNCATION_SUFFIX

    return content[:max_length] + TRUNCATION_SUFFIX
