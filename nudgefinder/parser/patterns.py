"""Regex patterns and phrase tables for reminder extraction.

Every table is an ordered list: callers iterate in declared order and the
first match wins.
"""

import re


def _phrase(phrase: str, plural: bool = False) -> re.Pattern:
    """Compile a whole-word, case-insensitive matcher for a phrase."""
    suffix = r'(?:s|es)?' if plural else ''
    return re.compile(rf'\b{re.escape(phrase)}{suffix}\b', re.IGNORECASE)


# Month names
MONTH_NAMES = {
    'january': 1, 'jan': 1,
    'february': 2, 'feb': 2,
    'march': 3, 'mar': 3,
    'april': 4, 'apr': 4,
    'may': 5,
    'june': 6, 'jun': 6,
    'july': 7, 'jul': 7,
    'august': 8, 'aug': 8,
    'september': 9, 'sep': 9, 'sept': 9,
    'october': 10, 'oct': 10,
    'november': 11, 'nov': 11,
    'december': 12, 'dec': 12,
}

# Weekday names (Monday=0)
WEEKDAY_NAMES = {
    'monday': 0,
    'tuesday': 1,
    'wednesday': 2,
    'thursday': 3,
    'friday': 4,
    'saturday': 5,
    'sunday': 6,
}

_MONTHS = '|'.join(sorted(MONTH_NAMES, key=len, reverse=True))

# Calendar dates - each carries a "year" group so yearless dates can roll forward
CALENDAR_DATE_PATTERNS = [
    re.compile(r'\b(?P<year>\d{4})-(\d{1,2})-(\d{1,2})\b'),  # 2026-03-15
    re.compile(
        r'\b(0?[1-9]|1[0-2])/(0?[1-9]|[12]\d|3[01])(?:/(?P<year>\d{4}|\d{2}))?\b'
    ),  # 3/15, 3/15/2026
    re.compile(
        rf'\b(?:{_MONTHS})\.?\s+\d{{1,2}}(?:st|nd|rd|th)?\b(?:,?\s+(?P<year>\d{{4}})\b)?',
        re.IGNORECASE,
    ),  # March 15th, Mar 15, 2026
    re.compile(
        rf'\b\d{{1,2}}(?:st|nd|rd|th)?\s+(?:of\s+)?(?:{_MONTHS})\b(?:,?\s+(?P<year>\d{{4}})\b)?',
        re.IGNORECASE,
    ),  # 15th of March
]

# Either a meridiem or the end of the number
_CLOCK_TAIL = r'(?:\s?(?:[ap]\.m\.|[ap]m\b)|\b)'

# Clock expressions (at 3pm, by 5:30, 9 o'clock)
CLOCK_TIME_PATTERNS = [
    re.compile(rf'\bat \d{{1,2}}(?::\d{{2}})?{_CLOCK_TAIL}', re.IGNORECASE),
    re.compile(rf'\bby \d{{1,2}}(?::\d{{2}})?{_CLOCK_TAIL}', re.IGNORECASE),
    re.compile(r'\b\d{1,2}(?::\d{2})?\s?(?:[ap]\.m\.|[ap]m\b)', re.IGNORECASE),
    re.compile(r"\b\d{1,2} o'clock\b", re.IGNORECASE),
]

# Components of a matched clock expression
CLOCK_COMPONENTS = re.compile(
    r'(?P<hour>\d{1,2})(?::(?P<minute>\d{2}))?\s?(?P<meridiem>[ap])?', re.IGNORECASE
)

# Day parts, most specific first
DAY_PART_PHRASES = [
    'this morning', 'this afternoon', 'this evening', 'tonight',
    'tomorrow morning', 'tomorrow afternoon', 'tomorrow evening',
    'early morning', 'late morning', 'early afternoon', 'late afternoon',
    'early evening', 'late evening', 'midnight', 'noon',
]

# Relative phrases: (phrase, relativedelta kwargs, label)
RELATIVE_PHRASES = [
    ('today', {}, 'Today'),
    ('tomorrow', {'days': 1}, 'Tomorrow'),
    ('yesterday', {'days': -1}, 'Yesterday'),
    ('next week', {'weeks': 1}, 'Next week'),
    ('this week', {}, 'This week'),
    ('next month', {'months': 1}, 'Next month'),
    ('this month', {}, 'This month'),
    ('in an hour', {'hours': 1}, 'In 1 hour'),
    ('in two hours', {'hours': 2}, 'In 2 hours'),
    ('in 30 minutes', {'minutes': 30}, 'In 30 minutes'),
]

# Non-specific adverbials, tried last
VAGUE_TIME_PATTERNS = [
    (phrase, _phrase(phrase))
    for phrase in [
        'soon', 'later', 'eventually', 'sometime', 'when possible',
        'before', 'after', 'during', 'while', 'until', 'by then',
    ]
]

# Explicit reminder phrasing: (phrase, base confidence)
EXPLICIT_REMINDER_PHRASES = [
    ("remind me to", 0.95),
    ("remind me about", 0.95),
    ("don't forget to", 0.95),
    ("don't forget about", 0.95),
    ("i need to remember to", 0.9),
    ("i need to remember about", 0.9),
    ("set reminder for", 0.95),
    ("set reminder to", 0.95),
    ("note to self:", 0.9),
    ("mental note:", 0.9),
]

# Words that signal the reminder names a concrete object or action
CONNECTIVE_WORDS = frozenset({'to', 'about'})

# Appointment and deadline phrasing: (phrase, pattern, urgency hint)
TIME_BASED_PATTERNS = [
    ('appointment at', _phrase('appointment at'), 'TODAY'),
    ('meeting at', _phrase('meeting at'), 'TODAY'),
    ('call at', _phrase('call at'), 'TODAY'),
    ('deadline', _phrase('deadline', plural=True), 'THIS_WEEK'),
    ('due by', _phrase('due by'), 'THIS_WEEK'),
    ('due on', _phrase('due on'), 'THIS_WEEK'),
    ('expires', _phrase('expires'), 'THIS_WEEK'),
    ('ends', _phrase('ends'), 'THIS_WEEK'),
    ('starts', _phrase('starts'), 'TODAY'),
    ('begins', _phrase('begins'), 'TODAY'),
    ('scheduled for', _phrase('scheduled for'), 'TODAY'),
    ('planned for', _phrase('planned for'), 'THIS_WEEK'),
]

STRONG_TIME_PHRASES = frozenset({'deadline', 'due by', 'appointment at', 'meeting at'})

# Named occasions: (phrase, pattern, category)
EVENT_PATTERNS = [
    (phrase, _phrase(phrase, plural=True), phrase.capitalize())
    for phrase in [
        'birthday', 'anniversary', 'vacation', 'holiday', 'conference',
        'presentation', 'interview', 'exam', 'test', 'graduation',
        'wedding', 'party', 'dinner', 'lunch', 'breakfast',
    ]
]

IMPORTANT_EVENTS = frozenset({'birthday', 'anniversary', 'wedding', 'graduation', 'interview'})

# Periodicity phrasing: (phrase, pattern)
RECURRING_PATTERNS = [
    (phrase, _phrase(phrase))
    for phrase in [
        'every day', 'daily', 'every morning', 'every evening',
        'every week', 'weekly', 'every monday', 'every friday',
        'every month', 'monthly', 'every year', 'annually',
        'regularly', 'periodically', 'routinely',
    ]
]

STRONG_RECURRING_PHRASES = frozenset({'every day', 'daily', 'weekly', 'monthly'})

# Explicit urgency keywords (substring match)
URGENT_KEYWORDS = ['urgent', 'asap', 'immediately', 'right now']

_WEEKDAY_PATTERN = re.compile(rf"\b(?:{'|'.join(WEEKDAY_NAMES)})\b", re.IGNORECASE)
_BARE_CLOCK_PATTERN = re.compile(r'\b\d{1,2}:\d{2}\b')


def looks_specific(text: str) -> bool:
    """Check whether text names a weekday, a clock time or a calendar date."""
    if _WEEKDAY_PATTERN.search(text) or _BARE_CLOCK_PATTERN.search(text):
        return True
    if any(pattern.search(text) for pattern in CLOCK_TIME_PATTERNS):
        return True
    return any(pattern.search(text) for pattern in CALENDAR_DATE_PATTERNS)
