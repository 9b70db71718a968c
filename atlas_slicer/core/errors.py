"""Error hierarchy for atlas-slicer.

Every failure the core can report is an AtlasError. The CLI catches
AtlasError once, prints its message on a single line and exits 1.
Nothing is written to the importer config sink after an error.
"""


class AtlasError(Exception):
    """Base class. `kind` is a stable identifier for JSON output."""

    kind = 'error'


class InvalidDocument(AtlasError):
    """The descriptor is not well-formed markup."""

    kind = 'invalid-document'


class MalformedAttribute(AtlasError):
    """A SubTexture element is missing a required attribute or has a non-numeric one."""

    kind = 'malformed-attribute'

    def __init__(self, index: int, attribute: str, value: str | None):
        self.index = index
        self.attribute = attribute
        self.value = value
        if value is None:
            detail = f'missing attribute {attribute!r}'
        else:
            detail = f'attribute {attribute!r} is not an integer: {value!r}'
        super().__init__(f'SubTexture #{index}: {detail}')


class NoRecordsFound(AtlasError):
    """The descriptor parsed fine but holds no SubTexture elements."""

    kind = 'no-records'

    def __init__(self, message: str = 'No subtextures found in XML'):
        super().__init__(message)


class InvalidSheet(AtlasError):
    """The sprite-sheet image cannot be opened."""

    kind = 'invalid-sheet'


class InvalidSpriteBox(AtlasError):
    """A SubTexture box cannot be cropped: width or height is not positive."""

    kind = 'invalid-sprite'
