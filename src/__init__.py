"""conllukit: slice and join CoNLL-U files along sentence boundaries."""

from conllukit.version import __version__

__all__ = ["__version__"]
