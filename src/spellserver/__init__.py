"""Network front ends for the correction engine: TCP sessions and a Flask API."""
from __future__ import annotations
from .session import ConnectionSession, GREETING
from .tcp import TextAnalysisServer, SocketChannel, serve

__all__ = ["ConnectionSession", "GREETING", "TextAnalysisServer", "SocketChannel", "serve"]
