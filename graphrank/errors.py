from __future__ import annotations


class GraphRankError(ValueError):
    """Base class for errors raised to callers of the ranking pipeline."""


class InsufficientContent(GraphRankError):
    def __init__(self, requested: int, available: int) -> None:
        super().__init__(
            f"text is too short: requested {requested} sentences, only {available} available"
        )
        self.requested = requested
        self.available = available


class InsufficientKeywords(GraphRankError):
    def __init__(self, requested: int, available: int) -> None:
        super().__init__(
            f"not enough keywords: requested {requested}, only {available} distinct words ranked"
        )
        self.requested = requested
        self.available = available


class AnalyzerFailure(GraphRankError):
    """The text analyzer could not parse one of the inputs.

    ``source`` names the input that failed, either ``"document"`` or ``"focus"``.
    The analyzer's own exception is kept as ``__cause__``.
    """

    def __init__(self, source: str, message: str) -> None:
        super().__init__(f"unable to parse {source}: {message}")
        self.source = source
