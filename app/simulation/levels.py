from typing import Dict, NamedTuple, Optional

LEVELS = ("Entry", "Mid", "Senior", "Lead", "Principal", "Executive")


class LevelProgression(NamedTuple):
    next_level: Optional[str]
    min_years: Optional[int]
    typical_years: Optional[int]
    max_years: Optional[int]
    salary_growth: float  # raise applied when promoted *out of* this level


LEVEL_PROGRESSION: Dict[str, LevelProgression] = {
    "Entry": LevelProgression("Mid", 2, 3, 5, 0.25),
    "Mid": LevelProgression("Senior", 3, 4, 7, 0.35),
    "Senior": LevelProgression("Lead", 3, 5, 8, 0.30),
    "Lead": LevelProgression("Principal", 3, 4, 6, 0.25),
    "Principal": LevelProgression("Executive", 4, 6, 10, 0.40),
    "Executive": LevelProgression(None, None, None, None, 0.15),
}

# Wording found in user profiles -> canonical level
LEVEL_ALIASES = {
    "entry": "Entry",
    "entry-level": "Entry",
    "junior": "Entry",
    "intern": "Entry",
    "mid": "Mid",
    "mid-level": "Mid",
    "intermediate": "Mid",
    "senior": "Senior",
    "lead": "Lead",
    "staff": "Lead",
    "principal": "Principal",
    "distinguished": "Principal",
    "executive": "Executive",
    "director": "Executive",
    "vp": "Executive",
}


def get_level_progression(level: Optional[str]) -> Optional[LevelProgression]:
    return LEVEL_PROGRESSION.get(level)


def normalize_level(raw_level: Optional[str], default: str = "Mid") -> str:
    if not raw_level:
        return default
    if raw_level in LEVEL_PROGRESSION:
        return raw_level
    return LEVEL_ALIASES.get(raw_level.strip().lower(), default)
