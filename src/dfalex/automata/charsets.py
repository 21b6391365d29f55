"""Character sets for O(1) classification in the bundled automata.

Frozensets: constant-time membership, immutable, allocated once.

Usage:
    from dfalex.automata.charsets import DIGITS

    case State.START, c if c in DIGITS:
        ...
"""

import string

DIGITS: frozenset[str] = frozenset(string.digits)

LETTERS: frozenset[str] = frozenset(string.ascii_letters)

# Characters with meaning in regex syntax
REGEX_SPECIAL: frozenset[str] = frozenset("()*|")
