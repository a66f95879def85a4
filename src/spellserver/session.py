# spellserver/session.py
from __future__ import annotations
import logging
from typing import Optional, Protocol

from spellcore.channel import Channel
from spellcore.engine import Engine
from spellcore.errors import ValidationError
from spellcore.models import CorrectionReport

log = logging.getLogger(__name__)

GREETING = "Hello, this is Text Analysis Server!\nPlease enter your input string:\n"


class LineChannel(Channel, Protocol):
    def read_line(self) -> str: ...


class ConnectionSession:
    """
    One client, one sentence:
      greeting -> one input line -> (error and stop | per-word exchanges,
      summary, goodbye). Closing the connection is the caller's job.
    """
    def __init__(self, engine: Engine, channel: LineChannel, peer: str = "-") -> None:
        self.engine = engine
        self.channel = channel
        self.peer = peer

    def run(self) -> Optional[CorrectionReport]:
        self.channel.send(GREETING)
        line = self.channel.read_line()
        try:
            report = self.engine.correct(line, self.channel)
        except ValidationError as e:
            log.info("Rejected input from %s: %s", self.peer, e)
            self.channel.send(f"{e}\n")
            return None
        return report
