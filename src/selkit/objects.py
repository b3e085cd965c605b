"""Plain data helpers: a rectangle factory and JSON round-tripping."""

import json
from typing import Any, TypeVar

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from selkit.exceptions import DecodeError

T = TypeVar('T')


class Rectangle(BaseModel):
    """Rectangle with a computed area.

    Example:
        >>> r = Rectangle.create(10, 20)
        >>> r.get_area()
        200
    """

    width: int | float = Field(description='Horizontal size')
    height: int | float = Field(description='Vertical size')

    @classmethod
    def create(cls, width: int | float, height: int | float) -> 'Rectangle':
        """Build a rectangle from positional width and height."""
        return cls(width=width, height=height)

    def get_area(self) -> int | float:
        """Return width times height."""
        return self.width * self.height


def get_json(obj: Any) -> str:
    """Return the compact JSON representation of ``obj``.

    Args:
        obj: Pydantic model or any JSON-serializable value

    Returns:
        JSON text without insignificant whitespace, e.g. ``'[1,2,3]'``.

    """
    if isinstance(obj, BaseModel):
        return obj.model_dump_json()
    return json.dumps(obj, separators=(',', ':'), ensure_ascii=False)


def from_json(model: type[T], text: str) -> T:
    """Build an object of type ``model`` from JSON text.

    Pydantic models are validated through ``model_validate_json``. Any other
    class is created without running ``__init__`` and receives the decoded
    keys as attributes.

    Args:
        model: Target class
        text: JSON object text

    Returns:
        Instance of ``model``.

    Raises:
        DecodeError: If the text is not valid JSON, not an object, or fails model validation.

    """
    if isinstance(model, type) and issubclass(model, BaseModel):
        try:
            return model.model_validate_json(text)
        except (PydanticValidationError, TypeError, ValueError) as e:
            raise DecodeError(f'Cannot decode {model.__name__}: {e}') from e

    try:
        params = json.loads(text)
    except json.JSONDecodeError as e:
        raise DecodeError(f'Invalid JSON: {e}') from e

    if not isinstance(params, dict):
        raise DecodeError(f'Expected a JSON object, got {type(params).__name__}')

    obj = object.__new__(model)
    for key, value in params.items():
        setattr(obj, key, value)
    return obj
