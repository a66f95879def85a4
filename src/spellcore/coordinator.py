# spellcore/coordinator.py
from __future__ import annotations
import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Dict

from .channel import Channel
from .config import TOP_K
from .DB.api import WordStore
from .models import CorrectionReport, Resolution
from .normalize import normalize_sentence, tokenize
from .resolver import WordResolver

log = logging.getLogger(__name__)

GOODBYE = "Thank you for using Text Analysis Server! Good Bye!\n"


def summary(report: CorrectionReport) -> str:
    return f"INPUT: {report.original}\nOUTPUT: {report.corrected}\n"


class SentenceCoordinator:
    """
    One sentence, one worker thread per word.

    All resolvers of the sentence share one exchange lock (so prompts never
    interleave on the channel) and the process-wide store. Results are put
    back together by word position, never by completion order.
    """
    def __init__(self, store: WordStore, *, top_k: int = TOP_K) -> None:
        self.store = store
        self.top_k = top_k

    def process(self, text: str, channel: Channel) -> CorrectionReport:
        """Validate (ValidationError before any prompt), resolve every word, send the summary."""
        sentence = normalize_sentence(text)
        words = tokenize(sentence)
        report = CorrectionReport(original=sentence, words=[w for _, w in words])

        if words:
            resolver = WordResolver(self.store, channel, threading.Lock(), top_k=self.top_k)
            results: Dict[int, Resolution] = {}
            with ThreadPoolExecutor(max_workers=len(words), thread_name_prefix="word") as pool:
                futures = {pool.submit(resolver.resolve, pos, w): pos for pos, w in words}
                for fut, pos in futures.items():
                    results[pos] = fut.result()
            report.resolutions = [results[pos] for pos, _ in words]

        log.info("Corrected %r -> %r", report.original, report.corrected)
        channel.send(summary(report))
        channel.send(GOODBYE)
        return report
