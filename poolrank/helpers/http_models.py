"""Type definitions for HTTP responses."""

from typing import Any


# Pool APIs answer with an object, but nothing stops them from sending
# a bare array or scalar; the adapters' response models reject those.
type JsonResponse = dict[str, Any] | list[Any] | str | int | float | bool | None

__all__ = ["JsonResponse"]
