from typing import Any, List, Type, TypeVar, Union

from pydantic import BaseModel, TypeAdapter, ValidationError

T = TypeVar("T", bound=BaseModel)


class InvalidFileError(ValueError):
    def __init__(self, model: Type[BaseModel], reason: str):
        self.model = model
        self.reason = reason
        super().__init__(f"Invalid JSON. Expected a JSON array of {model.__name__}: {reason}")


def _read_payload(payload: Any) -> Union[bytes, str]:
    if payload is None:
        raise TypeError("payload must not be None")
    if isinstance(payload, (bytes, bytearray, str)):
        return bytes(payload) if isinstance(payload, bytearray) else payload
    # SpooledTemporaryFile has no readable() before Python 3.11
    readable = getattr(payload, "readable", None)
    if not hasattr(payload, "read") or (readable is not None and not readable()):
        raise ValueError("Stream must be readable")
    return payload.read()


def read_json_list(payload: Any, model: Type[T]) -> List[T]:
    """
    Deserialize a JSON array of ``model`` records.

    ``payload`` is raw bytes/str or a readable binary file object. Anything that
    is not a JSON array of valid records raises InvalidFileError.
    """
    raw = _read_payload(payload)
    if not raw or not raw.strip():
        raise InvalidFileError(model, "empty payload")

    try:
        return TypeAdapter(List[model]).validate_json(raw)
    except ValidationError as e:
        raise InvalidFileError(model, f"{e.error_count()} validation error(s)") from e
