from uuid import uuid4


def new_id() -> str:
    """Primary keys are UUID4 text, generated by the application."""
    return str(uuid4())
