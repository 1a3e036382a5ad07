"""Text normalization into the canonical form compared for palindromes.

This module provides:
- normalize: lower-case then strip everything outside [a-z0-9]
- is_canonical: whether a string is already in canonical form
- TextNormalizer: protocol accepted by the evaluator
- CanonicalNormalizer: default TextNormalizer wrapping normalize
"""

from .service import CanonicalNormalizer, TextNormalizer, is_canonical, normalize

__all__ = [
    "CanonicalNormalizer",
    "TextNormalizer",
    "is_canonical",
    "normalize",
]
