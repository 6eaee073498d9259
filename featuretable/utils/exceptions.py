from __future__ import annotations


class FeatureTableError(RuntimeError):
    """Base exception for featuretable."""


class OrientationUndefinedError(FeatureTableError):
    """A gene or segment has no resolvable strand when its coordinates are rendered."""


class SinkWriteError(FeatureTableError):
    """The output destination failed to accept a row."""


class FieldFormatError(FeatureTableError):
    """A field contains a delimiter or line break and cannot be written unescaped."""


class TextDecodingError(FeatureTableError):
    """Serialized bytes could not be decoded back to text."""


class ResultsFormatError(FeatureTableError):
    """Result records could not be parsed into the annotation model."""
