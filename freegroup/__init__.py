# Freegroup: Free Group Word Canonicalizer
# Licensed under the Apache License, Version 2.0

"""Free groups via confluent word rewriting.

Provides letters and words, the cancellation relation and its closure,
diamond-lemma witnesses, the canonical-form reducer, free-group elements,
the universal lift, target groups and the word metric.
"""

__version__ = "0.1.0"

from .letter import Letter, Word, EMPTY, as_word, concat, inv_rev
from .reduction import (
    step_positions,
    step_at,
    one_step_reducts,
    is_step,
    is_red,
    red_closure,
    reduction_path,
)
from .reduce import ReductionTrace, reduce, reduce_trace, is_reduced, boundary_cancellation
from .confluence import diamond, diamond_at, check_local_confluence, join, equivalent
from .notation import parse_word, format_word
from .free_group import (
    FreeGroup,
    FreeGroupElement,
    mk,
    of,
    one,
    mul,
    inv,
    to_word,
    equals,
    norm,
    commutator,
)
from .targets import (
    Group,
    AdditiveGroup,
    FreeGroupTarget,
    FREE_GROUP,
    PermutationGroup,
    MatrixGroup,
    sanov_generators,
)
from .lift import lift, map_generators, pure, bind, prod, additive_sum, to_int, from_int
from .metric import distance, distance_matrix, sphere_sizes, expected_sphere_sizes, ball_size

__all__ = [
    "__version__",
    # words
    "Letter",
    "Word",
    "EMPTY",
    "as_word",
    "concat",
    "inv_rev",
    # reduction
    "step_positions",
    "step_at",
    "one_step_reducts",
    "is_step",
    "is_red",
    "red_closure",
    "reduction_path",
    "ReductionTrace",
    "reduce",
    "reduce_trace",
    "is_reduced",
    "boundary_cancellation",
    # confluence
    "diamond",
    "diamond_at",
    "check_local_confluence",
    "join",
    "equivalent",
    # notation
    "parse_word",
    "format_word",
    # group
    "FreeGroup",
    "FreeGroupElement",
    "mk",
    "of",
    "one",
    "mul",
    "inv",
    "to_word",
    "equals",
    "norm",
    "commutator",
    # targets
    "Group",
    "AdditiveGroup",
    "FreeGroupTarget",
    "FREE_GROUP",
    "PermutationGroup",
    "MatrixGroup",
    "sanov_generators",
    # lift
    "lift",
    "map_generators",
    "pure",
    "bind",
    "prod",
    "additive_sum",
    "to_int",
    "from_int",
    # metric
    "distance",
    "distance_matrix",
    "sphere_sizes",
    "expected_sphere_sizes",
    "ball_size",
]
