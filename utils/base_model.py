# utils/base_model.py
from typing import TypeVar, Any, cast
from pydantic import BaseModel

T = TypeVar('T', bound='ImmutableModel')


class ImmutableModel(BaseModel):
    """
    Base class for geometric value types.

    Instances behave like values rather than objects:
    - Immutability: fields cannot be reassigned after construction
    - Structural equality and hashing: fields are compared with ==, so
      instances holding NaN are never equal, matching float semantics
    - Copyability: modified copies are made via with_changes()
    """
    model_config = {
        "frozen": True,
    }

    def __eq__(self, other: Any) -> bool:
        """Compare field by field with ``==``, so a NaN field never matches."""
        if type(other) is not type(self):
            return NotImplemented
        return all(getattr(self, name) == getattr(other, name)
                   for name in type(self).model_fields)

    def __hash__(self) -> int:
        return hash((type(self),) + tuple(getattr(self, name) for name in type(self).model_fields))

    def with_changes(self: T, **changes: Any) -> T:
        """
        Create a new instance with specified changes.

        Nested values are passed through as-is rather than dumped and
        rebuilt, so a Point stays a Point inside a LineSegment copy.

        Args:
            **changes: Keyword arguments with field values to change

        Returns:
            New instance with updated values

        Raises:
            ValueError: If an invalid field name is provided
        """
        current_data = {name: getattr(self, name) for name in type(self).model_fields}

        for key, value in changes.items():
            if key not in current_data:
                raise ValueError(f"Invalid field: {key}")
            current_data[key] = value

        return cast(T, type(self)(**current_data))
