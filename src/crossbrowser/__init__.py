"""
Cross-Browser Support Package

Aspect-aware value resolution for a stylesheet preprocessor.

A value handed over by the host may carry alternate renderings for a
vendor prefix ("webkit", "moz", ...) or for the legacy rendering mode.
This package decides which of those renderings applies and substitutes it.

ARCHITECTURAL GUARANTEE:
------------------------
This package contains ZERO knowledge of:
    - Stylesheet parsing
    - Stylesheet emission
    - Expression evaluation

It manipulates already-parsed value trees only.

The browser capability dataset is static, read-only, and loaded once.
"""

__version__ = "0.1.0"
