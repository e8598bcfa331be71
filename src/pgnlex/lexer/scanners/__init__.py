"""Sub-scanners for the pgnlex lexer.

Each scanner is a mixin that takes over after dispatch has consumed the
lead character of a multi-character token.
"""

from __future__ import annotations

from pgnlex.lexer.scanners.castle import CastleScannerMixin
from pgnlex.lexer.scanners.comment import CommentScannerMixin
from pgnlex.lexer.scanners.number import NumberScannerMixin
from pgnlex.lexer.scanners.tag_pair import TagPairScannerMixin

__all__ = [
    "CastleScannerMixin",
    "CommentScannerMixin",
    "NumberScannerMixin",
    "TagPairScannerMixin",
]
