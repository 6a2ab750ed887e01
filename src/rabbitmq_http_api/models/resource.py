"""Dynamic records for management API responses.

The management API defines the shape of every entity it returns, so the
client does not model queues, exchanges or users individually. A
:class:`Resource` is a ``dict`` whose keys can also be read as attributes,
with nested objects converted recursively.

Examples:
    >>> queue = Resource({"name": "q1", "arguments": {"x-max-length": 10}})
    >>> queue.name
    'q1'
    >>> queue.arguments["x-max-length"]
    10
"""

from typing import Any, Dict, List, Optional

from ..exceptions import DecodingError


def _convert(value: Any) -> Any:
    if isinstance(value, Resource):
        return value
    if isinstance(value, dict):
        return Resource(value)
    if isinstance(value, list):
        return [_convert(item) for item in value]
    return value


class Resource(dict):
    """Mapping of string keys to JSON-derived values with attribute access.

    Missing attributes raise :class:`AttributeError`, so ``getattr`` with a
    default and ``hasattr`` behave as usual. Keys that are not valid Python
    identifiers (``"x-max-length"``) remain reachable through item access.
    """

    def __init__(self, data: Optional[Dict[str, Any]] = None, **kwargs: Any):
        super().__init__()
        self.update(data or {}, **kwargs)

    def __setitem__(self, key: str, value: Any) -> None:
        super().__setitem__(key, _convert(value))

    def update(self, *args: Any, **kwargs: Any) -> None:
        for key, value in dict(*args, **kwargs).items():
            self[key] = value

    def setdefault(self, key: str, default: Any = None) -> Any:
        if key not in self:
            self[key] = default
        return self[key]

    def copy(self) -> "Resource":
        return Resource(self)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self[name]
        except KeyError:
            raise AttributeError(
                f"{self.__class__.__name__} has no attribute {name!r}"
            ) from None

    def __setattr__(self, name: str, value: Any) -> None:
        if name.startswith("_"):
            super().__setattr__(name, value)
        else:
            self[name] = value

    def __delattr__(self, name: str) -> None:
        try:
            del self[name]
        except KeyError:
            raise AttributeError(name) from None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({dict.__repr__(self)})"


def decode_resource(body: Any) -> Resource:
    """Decode a single-entity response body.

    :param body: JSON-decoded body; ``None`` for an empty response
    :return: The body as a Resource, empty when there was no body
    :raises DecodingError: If the body is not a JSON object
    """
    if body is None or body == "":
        return Resource()
    if not isinstance(body, dict):
        raise DecodingError(
            f"Expected a JSON object, got {type(body).__name__}",
            body=body if isinstance(body, str) else None,
        )
    return Resource(body)


def decode_resource_collection(body: Any) -> List[Any]:
    """Decode a collection response body.

    Each object in the array becomes its own Resource; server order is kept.

    :param body: JSON-decoded body; ``None`` for an empty response
    :return: List of Resources
    :raises DecodingError: If the body is not a JSON array
    """
    if body is None or body == "":
        return []
    if not isinstance(body, list):
        raise DecodingError(
            f"Expected a JSON array, got {type(body).__name__}",
            body=body if isinstance(body, str) else None,
        )
    return [_convert(item) for item in body]
