"""b64engine interfaces package.

This package provides protocol definitions for engines and for the stream
sources and sinks used by streaming encode and decode.
"""

from .engine import IEngine
from .io import IByteSink, IByteSource, ITextSink, ITextSource

__all__ = [
    # engine
    "IEngine",
    # io
    "IByteSink",
    "IByteSource",
    "ITextSink",
    "ITextSource",
]
