WORD_LENGTH = 5
MAX_TURNS = 6

# Picked empirically from benchmark runs rather than derived.
OPENING_WORD = "salet"

NO_MATCH = 0
LETTER_MATCH = 1
EXACT_MATCH = 2
