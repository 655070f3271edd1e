"""
Exception hierarchy for certmap.

Every error raised on purpose by the core derives from CertmapError so
callers (the CLI in particular) can catch one type.
"""


class CertmapError(Exception):
    """Base class for all certmap errors."""


class SchemaError(CertmapError):
    """
    Raised when a raw catalog import violates the expected shape.

    Covers missing fields, wrong field types, duplicate identifiers and
    dangling link references. Fatal at load time: no partial catalog is
    ever produced.

    Attributes:
        path: Location of the offending value, e.g. ``certs[3].id``.
    """

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(f"{path}: {message}" if path else message)


class IntegrityFault(CertmapError):
    """
    Raised when already-validated data breaks an assembly contract.

    Typically a link whose endpoint is missing from the node set handed
    to the graph assembler, i.e. inconsistent vendor filtering upstream.
    """
