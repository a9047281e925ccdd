"""Fatal error types for a symbol table run.

Per-record rejections are not errors: the asset filter logs them and moves on.
Everything below aborts the run before the mapping file is touched.
"""


class SymbolgenError(Exception):
    """Base exception for all symbol generator errors"""
    pass


class FeedError(SymbolgenError):
    """Raised when the market feed cannot be retrieved"""
    pass


class FeedCorruptionError(FeedError):
    """Raised when the feed was retrieved but its content cannot be trusted"""
    pass


class MappingStoreError(SymbolgenError):
    """Raised when the persisted symbol mapping cannot be read or written"""
    pass


class RenderError(SymbolgenError):
    """Raised when a generated artifact cannot be rendered or written"""
    pass
