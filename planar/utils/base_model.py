# planar/utils/base_model.py
from typing import TypeVar, Any, cast
from pydantic import BaseModel

T = TypeVar('T', bound=BaseModel)


class ImmutableModel(BaseModel):
    """
    Base class for the geometry value types.

    - Immutability: instances are frozen after creation
    - Value ownership: nested models are revalidated into fresh instances,
      so a Line never shares a Point instance with its caller
    - Copyability: modified copies via with_changes()
    """
    model_config = {
        "frozen": True,
        "revalidate_instances": "always",
    }

    def with_changes(self, **changes: Any) -> T:
        """
        Create a new instance with specified changes.

        Args:
            **changes: Keyword arguments with field values to change

        Returns:
            New instance with updated values

        Raises:
            ValueError: If an invalid field name is provided
        """
        current_data = dict(self)

        for key, value in changes.items():
            if key not in current_data:
                raise ValueError(f"Invalid field: {key}")
            current_data[key] = value

        return cast(T, self.__class__.model_validate(current_data))
