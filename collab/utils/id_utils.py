import uuid


def generate_id() -> str:
    """
    Generate an opaque record identifier.

    Identifiers are random UUID4 strings, so records created in the same
    millisecond never collide.
    """
    return str(uuid.uuid4())
