# Freegroup: Free Group Word Canonicalizer
# Licensed under the Apache License, Version 2.0

"""Reduce the words listed in the config and report their normal forms."""

from freegroup.notation import format_word, parse_word
from freegroup.reduce import reduce_trace
from tasks.base import BaseTask
from log import get_logger

logger = get_logger(__name__)


class ReduceTask(BaseTask):
    """Canonicalizes ``cfg.words`` (case notation) over ``cfg.alphabet``."""

    def get_data(self):
        words = self.cfg.get('words', None) or []
        return [parse_word(str(text), alphabet=self.group.alphabet) for text in words]

    def evaluate(self, data) -> dict:
        results = {}
        total_cancellations = 0
        for word in data:
            trace = reduce_trace(word)
            total_cancellations += trace.cancellations
            logger.info("%s -> %s (norm %d, %d cancellations)",
                        format_word(word), format_word(trace.word),
                        len(trace.word), trace.cancellations)
            results[format_word(word)] = format_word(trace.word)
        return {
            'reduced': results,
            'words': len(data),
            'cancellations': total_cancellations,
        }
