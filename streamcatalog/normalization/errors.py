class NormalizationError(Exception):
    """Custom exception for data normalization errors."""

    pass


class MalformedRecordError(NormalizationError):
    """A single raw supplier record is structurally unusable and must be skipped."""

    pass
