from .iterator import FullyPeekableIterator, fully_peekable


__version__ = '0.1.0'


__all__ = [
    'FullyPeekableIterator',
    'fully_peekable',
]
