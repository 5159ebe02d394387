"""Sort a small graph, then show the cycle error after adding one edge.

    A--> B--> D--> E <---F
    |         ^          |
    |         |          |
    +-------> C <--------+
"""

import dagsort

EDGES = [("B", "D"), ("D", "E"), ("A", "B"), ("A", "C"), ("C", "D"), ("F", "C"), ("F", "E")]

if __name__ == "__main__":
    print("Sorted correctly:", dagsort.toposort(EDGES))

    # D -> F closes the cycle D -> F -> C -> D
    try:
        dagsort.toposort([*EDGES, ("D", "F")])
    except dagsort.CycleError as e:
        print("Cycle detected:", e)
