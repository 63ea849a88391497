"""
Versioning — Version constants and conformance checks.
"""

from jsonnlp import __schema_version__, __version__

PACKAGE_VERSION = __version__
SCHEMA_VERSION = __schema_version__


def parse_version(version: str) -> tuple[int, int]:
    """
    Parse a ``major.minor`` version string.

    Raises:
        ValueError: If the string is not a dotted numeric version
    """
    parts = version.strip().split(".")
    major = int(parts[0])
    minor = int(parts[1]) if len(parts) > 1 else 0
    return major, minor


def check_conformance(version: str) -> bool:
    """
    Check if a ``DC.conformsTo`` value is readable by this package.

    Revisions within a major version only add fields, so every payload
    up to and including the current major version is readable. A later
    major version, an empty value or a non-numeric value is not.
    """
    if not version:
        return False

    try:
        major, _ = parse_version(version)
    except ValueError:
        return False

    current_major, _ = parse_version(SCHEMA_VERSION)
    return 0 <= major <= current_major
