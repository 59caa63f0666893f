"""Classified failures of the code generation pipeline

Every stage of the pipeline fails with exactly one of these types. They are
returned inside ``Failure`` values rather than raised, and the HTTP layer maps
each class to a status code.
"""

from typing import Optional


class GenerateCodeError(Exception):
    """Base error for code generation"""

    pass


class UnsupportedSymbology(GenerateCodeError):
    """Symbology identifier is not one of the supported values"""

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f"Unsupported symbology: {identifier!r}")


class EncodingError(GenerateCodeError):
    """Payload rejected by the symbology encoder"""

    def __init__(self, message: str, symbology: Optional[str] = None):
        self.symbology = symbology
        super().__init__(message)


class InvalidSizeFormat(GenerateCodeError):
    """Size specifier is not of the form <width>x<height>"""

    def __init__(self, specifier: str):
        self.specifier = specifier
        super().__init__(f"Invalid size format: {specifier!r}")


class InvalidSizeValue(GenerateCodeError):
    """Size specifier parsed but a dimension is out of range"""

    def __init__(self, specifier: str, reason: str):
        self.specifier = specifier
        self.reason = reason
        super().__init__(f"Invalid size {specifier!r}: {reason}")


class ScalingError(GenerateCodeError):
    """Bitmap cannot be scaled to the requested dimensions"""

    pass


class SerializationError(GenerateCodeError):
    """Image could not be written"""

    pass
