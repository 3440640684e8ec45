"""Constants and mappings for the pick'em game."""

# Built-in season used until an administrator saves a replacement schedule
DEFAULT_SCHEDULE = {
    '1': [
        {'home': 'Cowboys', 'away': 'Giants'},
        {'home': 'Packers', 'away': 'Bears'},
        {'home': 'Chiefs', 'away': 'Broncos'},
    ],
    '2': [
        {'home': 'Patriots', 'away': 'Jets'},
        {'home': 'Vikings', 'away': 'Lions'},
        {'home': 'Rams', 'away': 'Seahawks'},
    ],
    '3': [
        {'home': 'Eagles', 'away': 'Washington'},
        {'home': 'Steelers', 'away': 'Bengals'},
        {'home': '49ers', 'away': 'Cardinals'},
    ],
}

# Persistent key-value store keys
STORE_KEYS = {
    'schedule': 'nflpickem_schedule',
    'picks': 'nflpickem_picks',
    'results': 'nflpickem_results',
    'tiebreakers': 'nflpickem_tiebreakers',
    'user_name': 'nflpickem_username',
}

HOME = 'home'
AWAY = 'away'
SIDES = (HOME, AWAY)

# Outcome codes recorded in results (0 = home won, 1 = away won)
SIDE_TO_OUTCOME = {HOME: 0, AWAY: 1}
OUTCOME_TO_SIDE = {v: k for k, v in SIDE_TO_OUTCOME.items()}

DEFAULT_ADMIN_PASSPHRASE = 'letmein'
DEFAULT_USER_NAME = 'Player 1'

EXPORT_SUFFIX = '_picks.json'
