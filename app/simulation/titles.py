import re

# First entry is the prefix used when someone is promoted into the level
LEVEL_TITLES = {
    "Entry": ["Junior", "Associate", "Analyst"],
    "Mid": ["", "II", "Specialist"],
    "Senior": ["Senior", "Sr.", "Lead"],
    "Lead": ["Lead", "Staff", "Principal I"],
    "Principal": ["Principal", "Distinguished", "Architect"],
    "Executive": ["Director", "VP", "SVP", "C-Level"],
}

RECOGNIZED_PREFIXES = ["Junior", "Senior", "Lead", "Principal", "Sr.", "Staff", "Associate", "Analyst"]

_PREFIX_PATTERN = re.compile(
    r"^(" + "|".join(re.escape(p) for p in RECOGNIZED_PREFIXES) + r")\s*",
    re.IGNORECASE
)


def strip_level_prefix(title: str) -> str:
    """Removes one leading seniority word: 'Senior Data Engineer' -> 'Data Engineer'."""
    return _PREFIX_PATTERN.sub("", title, count=1)


def next_title(current_title: str, new_level: str) -> str:
    prefix = LEVEL_TITLES.get(new_level, [""])[0]
    base_title = strip_level_prefix(current_title)
    return f"{prefix} {base_title}".strip()
