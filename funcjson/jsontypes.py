from typing import Any

RawJson = dict[str, Any] | list[Any] | str | int | float | bool | None
RawJsonDict = dict[str, Any]
Headers = dict[str, str]
