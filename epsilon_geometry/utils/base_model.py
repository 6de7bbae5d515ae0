# epsilon_geometry/utils/base_model.py
from typing import TypeVar, Any, cast
from pydantic import BaseModel

T = TypeVar('T', bound=BaseModel)


class ImmutableModel(BaseModel):
    """
    Base class for the geometric value types.

    Points, segments and intersection results are values handed across the
    predicate boundary, so none of them may change once built:
    - Immutability: instances are frozen after validation
    - Copyability: modified copies go through with_changes() and are revalidated
    """
    model_config = {
        "frozen": True,
    }

    def with_changes(self, **changes: Any) -> T:
        """
        Build a validated copy of this value with some fields replaced.

        Args:
            **changes: Field names mapped to their replacement values

        Returns:
            New instance of the same class

        Raises:
            ValueError: If a name is not a field of the model, or the
                replacement fails validation
        """
        unknown = [key for key in changes if key not in type(self).model_fields]
        if unknown:
            raise ValueError(f"Invalid field: {unknown[0]}")

        # Keep nested models as instances so they are not re-parsed from dicts
        data = {name: getattr(self, name) for name in type(self).model_fields}
        data.update(changes)

        return cast(T, type(self).model_validate(data))
