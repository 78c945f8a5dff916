class CodeConnectError(Exception):
    """Base class for errors raised while generating a Code Connect file."""


class UnsupportedIntrinsicError(CodeConnectError):
    """An intrinsic kind that cannot be rendered into a props expression."""

    def __init__(self, kind: str):
        self.kind = kind
        super().__init__(f"kind {kind} not supported for prop mapping")


class UnsupportedValueMappingError(CodeConnectError):
    """A value mapping target that is neither a literal nor an intrinsic."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Unsupported value mapping target: {value!r}")


class FormatterError(CodeConnectError):
    """The formatter rejected the generated source or could not be run."""
