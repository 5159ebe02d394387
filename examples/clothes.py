"""Dependency-sort Professor Bumstead's clothes.

Each pair (x, y) means "x is put on after y", so the pairs are written as
(dependent, dependency) and the reversed sort gives the dressing order.
"""

import dagsort

CLOTHES = [
    ("jacket", "tie"),
    ("jacket", "belt"),
    ("tie", "shirt"),
    ("belt", "shirt"),
    ("belt", "pants"),
    ("pants", "undershorts"),
    ("shoes", "pants"),
    ("shoes", "undershorts"),
    ("shoes", "socks"),
    ("watch", dagsort.NO_VERTEX),
]

if __name__ == "__main__":
    print("Dependency-sorting Professor Bumstead's clothes:")
    print("Sorted correctly:", dagsort.toposort_reversed(CLOTHES))
