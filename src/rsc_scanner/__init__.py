"""rsc-scanner core package.

This package provides the detection engine shared by the generic folder
scanner and the WordPress plugins/themes scanner.
"""

__all__ = [
    "core",
]
