"""
Exceptions raised by the filing parser.

Only FormatError aborts a parse. Missing fields, undecodable attachments and
unknown form types degrade to partial output instead of raising.
"""


class FormatError(ValueError):
    """A header value has a shape the parser cannot interpret (e.g. a datetime)."""

    def __init__(self, message: str, value: object = None):
        super().__init__(message)
        self.value = value
