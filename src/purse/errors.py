"""Error definitions for PURSE."""

# ============================================================================
#                               General errors
# ============================================================================


class PurseError(Exception):
    """Base class for all PURSE errors."""


# ============================================================================
#                               Chunk errors
# ============================================================================


class ChunkProcessingError(PurseError):
    """Raised when a per-token callback fails inside ``work_on_str_chunks``.

    The original exception is available as ``__cause__``.
    """

    def __init__(self, token: str, cause: BaseException) -> None:
        self.token = token
        super().__init__(f"error processing chunk {token!r}: {cause}")
