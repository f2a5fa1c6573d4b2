class HuffError(Exception):
    """Base class for every error raised by the compressor core."""


class ArchiveIOError(HuffError):
    """Open/read/write failure on the input or output file."""


class EmptyInputError(HuffError, ValueError):
    """Nothing to compress (zero-length input)."""


class FormatError(HuffError, ValueError):
    """Bad magic, or header / frequency data truncated or inconsistent."""


class ResourceExhaustionError(HuffError):
    pass


class QueueCapacityError(HuffError, IndexError):
    pass


class StreamDesyncError(HuffError, ValueError):
    """Decoding walked off a nonexistent tree edge (corrupt payload)."""
