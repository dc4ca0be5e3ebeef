import json
from typing import Any

from .api_result_size_error import ApiResultSizeError


class ApiResult:
    """ In-memory output of an API module. Values are added under a path of nested keys; the size of the
    added values is counted and limited. Values added while the size check is disabled are not counted. """

    def __init__(self, *, is_raw_mode: bool = False, max_size: int | None = None) -> None:
        self.is_raw_mode = is_raw_mode
        self.max_size = max_size
        self.size = 0
        self.data: dict[str, Any] = {}
        self._check_size = True

    def get_is_raw_mode(self) -> bool:
        return self.is_raw_mode

    def disable_size_check(self) -> None:
        self._check_size = False

    def enable_size_check(self) -> None:
        self._check_size = True

    def add_value(self, path: str | list[str] | None, name: str, value: Any) -> None:
        """ Add value under data[path...][name]. A path of None adds to the top level.

        Raises:
            ApiResultSizeError: If the size check is enabled and the value does not fit. Nothing is added then.
        """
        value_size = len(json.dumps(value, default=str).encode("utf-8"))
        if self._check_size and self.max_size is not None and self.size + value_size > self.max_size:
            raise ApiResultSizeError(f"Adding '{name}' ({value_size} bytes) would exceed the result size limit of {self.max_size} bytes.")

        target = self.data
        for key in [path] if isinstance(path, str) else (path or []):
            target = target.setdefault(key, {})
        target[name] = value

        # Values added while the size check is disabled do not count towards the limit
        if self._check_size:
            self.size += value_size
