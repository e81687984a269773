"""Hard failures raised to callers.

InvalidInputError means the caller must fix its input; GenerationError means
the generative backend failed or answered with something unusable.
"""


class InvalidInputError(ValueError):
    pass


class GenerationError(RuntimeError):
    pass
