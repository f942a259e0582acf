from mediaconv.domain.enums.stream_kind import StreamKind
__all__ = [
    "StreamKind",
]
