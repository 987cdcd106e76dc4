# evecodec/eve/errors.py


class EveDecodeError(ValueError):
    """
    Base for every failure reported by the EVE codec.
    `path` is the dotted wire path of the offending field ("" for the record itself).
    """

    def __init__(self, message: str, path: str = ""):
        super().__init__(message)
        self.message = message
        self.path = path

    def __str__(self) -> str:
        if self.path:
            return f"{self.path}: {self.message}"
        return self.message


class FormatError(EveDecodeError):
    """Timestamp does not match the sensor layout."""


class ParseError(EveDecodeError):
    """JSON is malformed, or a field has the wrong JSON type for its slot."""
