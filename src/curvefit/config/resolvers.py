# config/resolvers.py
from pathlib import Path
from typing import Iterable, List, Union
from platformdirs import user_log_dir

from curvefit.domain.exceptions import InvalidInput
from curvefit.models.shapes import Shape, get_shape

APP = "curvefit"

def default_log_dir() -> Path:
    return Path(user_log_dir(APP))

def resolve_shapes(shapes: Iterable[Union[str, Shape]]) -> List[Shape]:
    """
    Turn shape names (or shapes) into an ordered, duplicate-free list.
    The first occurrence of a shape fixes its position.
    """
    resolved: List[Shape] = []
    seen = set()
    for item in shapes:
        shape = get_shape(item) if isinstance(item, str) else item
        if shape.name in seen:
            continue
        seen.add(shape.name)
        resolved.append(shape)

    if not resolved:
        raise InvalidInput(
            "At least one shape is required to fit",
            field_name="shapes",
        ).add_suggestion("Pass e.g. shapes=['Linear', 'Quadratic']")
    return resolved
