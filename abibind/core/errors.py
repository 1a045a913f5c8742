"""
Error types raised while turning artifacts into bindings
"""


class BindingGenerationError(Exception):
    """Base class for failures that abort a generation run"""


class MalformedTypeError(BindingGenerationError):
    """An ABI type descriptor matches none of the known type forms"""

    def __init__(self, raw_type: str, reason: str = ""):
        self.raw_type = raw_type
        message = f"Unknown Type: {raw_type!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class MissingTupleComponentsError(MalformedTypeError):
    """A `tuple` descriptor arrived without its component list"""

    def __init__(self, raw_type: str = "tuple"):
        super().__init__(raw_type, "tuple specified without components")


class UnrecognizedEntryKindError(BindingGenerationError):
    """An ABI entry has a `type` other than constructor/function/event/fallback"""

    def __init__(self, kind):
        self.kind = kind
        super().__init__(f"Unrecognised ABI Element Type: {kind!r}")


class InvalidArtifactError(BindingGenerationError):
    """An artifact file could not be read or does not look like an artifact"""

    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(f"Invalid artifact {path}: {reason}")
