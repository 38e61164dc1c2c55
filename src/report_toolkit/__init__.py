"""Top-level package for the academic report toolkit.

Provides subpackages:
- report_toolkit.core – immutable models, schema validation, serialization
- report_toolkit.assessment – score averaging, predicate bands, recalculation
- report_toolkit.reporting – indicator tree flattening and subject reports
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("report_toolkit")
except PackageNotFoundError:
    # Source checkout without an install (tests put src/ on sys.path)
    __version__ = "0.0.0"

__all__: list[str] = ["__version__"]
