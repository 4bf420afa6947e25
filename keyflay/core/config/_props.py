from __future__ import annotations


def _clamp(v, min_v, max_v):
    if min_v is not None:
        v = max(min_v, v)
    if max_v is not None:
        v = min(max_v, v)
    return v


def int_prop(key: str, *, default: int, min_v: int | None = None, max_v: int | None = None) -> property:
    def _coerce(value) -> int:
        try:
            v = int(value)
        except (TypeError, ValueError):
            v = int(default)
        return _clamp(v, min_v, max_v)

    def _get(self) -> int:
        return _coerce(self._settings.get(key, default))

    def _set(self, value: int) -> None:
        self._settings[key] = _coerce(value)
        self._save()

    return property(_get, _set)


def float_prop(key: str, *, default: float, min_v: float | None = None, max_v: float | None = None) -> property:
    def _coerce(value) -> float:
        try:
            v = float(value)
        except (TypeError, ValueError):
            v = float(default)
        return _clamp(v, min_v, max_v)

    def _get(self) -> float:
        return _coerce(self._settings.get(key, default))

    def _set(self, value: float) -> None:
        self._settings[key] = _coerce(value)
        self._save()

    return property(_get, _set)
