import enum


class MoodResult(str, enum.Enum):
    BALANCED = 'Balanced'
    NEEDS_ATTENTION = 'Needs Attention'
    OVERLOADED = 'Overloaded'


class MetricType(str, enum.Enum):
    SCREEN_TIME = 'screen_time'
    SLEEP = 'sleep'
    ACTIVITY = 'activity'
    MOOD = 'mood'


class Theme(str, enum.Enum):
    LIGHT = 'light'
    DARK = 'dark'


class QuizCategory(str, enum.Enum):
    COGNITIVE = 'cognitive'
    PHYSICAL = 'physical'
    DIGITAL = 'digital'


class LikeAction(str, enum.Enum):
    LIKED = 'liked'
    UNLIKED = 'unliked'
