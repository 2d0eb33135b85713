"""Size guards for the expensive computers.

Above these thresholds a computer abstains with its ``unconstrained``
variant instead of running. The values are observable behaviour: changing
one changes which graphs get a definite answer.
"""

# Backtracking search for Hamiltonian cycles and paths.
HAMILTONIAN_LIMIT = 10

# Isomorphism test against the explicit complement.
SELF_COMPLEMENTARY_LIMIT = 8

# Automorphism orbit enumeration.
VERTEX_TRANSITIVE_LIMIT = 6

# Minimum sizes below which the network statistics are meaningless.
SCALE_FREE_MIN_VERTICES = 10
SMALL_WORLD_MIN_VERTICES = 3
COMMUNITY_MIN_VERTICES = 4

# VF2 induced-pattern scans and asteroidal-triple search.
INDUCED_SUBGRAPH_LIMIT = 64

# Chordless-cycle enumeration (holes and antiholes).
HOLE_SEARCH_LIMIT = 16

# Odd hole / odd antihole search once the sufficient perfection tests fail.
PERFECT_EXACT_LIMIT = 16

# Smallest-module closure over all vertex pairs.
MODULAR_LIMIT = 12

# Probe recognition: vertex count when no probe designation is given, and
# number of candidate non-probe pairs whose subsets are tried as fill edges.
PROBE_VERTEX_LIMIT = 10
PROBE_PAIR_LIMIT = 10
