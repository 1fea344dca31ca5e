"""Merge rule for repeated query, body and header inputs."""
from typing import Any, Mapping, MutableMapping


def merge_field(src: Any, obj: Any) -> Any:
    """
    Combine the current value of a field with an incoming value.

    - list/tuple replaces src (even when empty)
    - non-empty str/bytes replaces src
    - non-empty mapping is merged into src, later keys win; src is
      updated in place when it is already a mutable mapping
    - anything else (None, empty, numbers, booleans) leaves src unchanged

    Args:
        src: Current field value
        obj: Incoming value

    Returns:
        New field value
    """
    if isinstance(obj, (list, tuple)):
        return obj
    if isinstance(obj, (str, bytes)):
        return obj if obj else src
    if isinstance(obj, Mapping) and len(obj) > 0:
        if not isinstance(src, MutableMapping):
            src = {}
        src.update(obj)
        return src
    return src
