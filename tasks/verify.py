# Freegroup: Free Group Word Canonicalizer
# Licensed under the Apache License, Version 2.0

"""Exhaustive check of the rewriting system on all short words.

For every word up to ``verify.max_length`` letters (reduced or not):

- ``reduce`` is idempotent, returns a reduced word reachable by ``Red``,
  and performs at most ``len(w) // 2`` cancellations;
- every one-step reduct has the same normal form (so, by induction on
  length, every ``Red``-descendant does);
- every pair of steps closes a diamond;
- ``inv_rev`` is an involution commuting with ``reduce``.
"""

import itertools

from tqdm import tqdm

from freegroup.confluence import check_local_confluence
from freegroup.letter import Letter, inv_rev
from freegroup.notation import format_word
from freegroup.reduce import is_reduced, reduce, reduce_trace
from freegroup.reduction import is_red, one_step_reducts
from tasks.base import BaseTask
from log import get_logger

logger = get_logger(__name__)


def word_failures(word) -> list:
    """Names of the properties ``word`` violates; empty when all hold."""
    failures = []
    trace = reduce_trace(word)
    normal = trace.word
    if reduce(normal) != normal:
        failures.append('idempotence')
    if not is_reduced(normal) or not is_red(word, normal):
        failures.append('normal_form')
    if trace.cancellations > len(word) // 2 or len(word) - 2 * trace.cancellations != len(normal):
        failures.append('cancellation_bound')
    if any(reduce(reduct) != normal for _, reduct in one_step_reducts(word)):
        failures.append('uniqueness')
    if not check_local_confluence(word):
        failures.append('local_confluence')
    rev = inv_rev(word)
    if inv_rev(rev) != word:
        failures.append('involution')
    if reduce(rev) != inv_rev(normal):
        failures.append('inv_rev_commutes')
    return failures


class VerifyTask(BaseTask):
    """Checks confluence consequences on every word up to a length."""

    def get_data(self):
        max_length = self.cfg.get('verify', {}).get('max_length', 6)
        letters = [Letter(g, s) for g in self.group.alphabet for s in (True, False)]
        total = sum(len(letters) ** n for n in range(max_length + 1))
        words = itertools.chain.from_iterable(
            itertools.product(letters, repeat=n) for n in range(max_length + 1)
        )
        return words, total

    def evaluate(self, data) -> dict:
        words, total = data
        fail_fast = self.cfg.get('verify', {}).get('fail_fast', False)
        checked = 0
        failed = 0
        for word in tqdm(words, total=total, desc="verify", leave=False):
            checked += 1
            failures = word_failures(word)
            if failures:
                failed += 1
                logger.error("%s violates %s", format_word(word), ", ".join(failures))
                if fail_fast:
                    raise RuntimeError(f"{format_word(word)} violates {', '.join(failures)}")
        if failed:
            logger.warning("%d of %d words failed", failed, checked)
        return {'checked': checked, 'failed': failed}
