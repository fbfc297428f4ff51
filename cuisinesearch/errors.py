from __future__ import annotations


class CuisineSearchError(Exception):
    """Base class for every error the search core reports to its caller."""

    http_status: int = 500


class SourceReadError(CuisineSearchError):
    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"failed to read source '{source}': {reason}")


class FormatError(CuisineSearchError):
    def __init__(self, source: str, row: int, expected: int, actual: int) -> None:
        self.source = source
        self.row = row
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"row {row} of '{source}' has {actual} columns, expected {expected}"
        )


class ParseError(CuisineSearchError):
    def __init__(self, source: str, row: int, field: str, value: str) -> None:
        self.source = source
        self.row = row
        self.field = field
        self.value = value
        super().__init__(
            f"row {row} of '{source}': field '{field}' is not a non-negative "
            f"integer: {value!r}"
        )


class CriteriaDecodeError(CuisineSearchError):
    http_status = 400

    def __init__(self, field: str, value: str) -> None:
        self.field = field
        self.value = value
        super().__init__(f"search parameter '{field}' expects an integer, got {value!r}")


class EmptyQueryError(CriteriaDecodeError):
    def __init__(self) -> None:
        self.field = ""
        self.value = ""
        Exception.__init__(self, "mandatory parameters missed")
