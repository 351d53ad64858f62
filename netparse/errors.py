class InferenceError(RuntimeError):
    """The inference service answered, but not with a chat message."""
