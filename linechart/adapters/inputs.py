from __future__ import annotations

from collections.abc import Mapping, Sequence
from decimal import Decimal
from typing import Any

import numpy as np

from linechart.errors import ChartDataError
from linechart.series import DataSet, Series


try:
    import pandas as pd
except Exception:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]


def coerce_dataset(data: Any) -> DataSet:
    """Build a ``DataSet`` from the shapes callers commonly hold.

    Accepted: a ``DataSet``; a pandas DataFrame (index is x, one series per
    numeric column); a mapping of name to points; a ``{"data": [...]}`` payload
    whose items are single-name mappings; or a sequence of ``Series`` or mappings.
    """
    if isinstance(data, DataSet):
        return data
    if data is None:
        raise ChartDataError("data is required")
    if pd is not None and isinstance(data, pd.DataFrame):
        return _from_dataframe(data)
    if isinstance(data, Mapping):
        if set(data.keys()) == {"data"} and _is_entry_list(data["data"]):
            return coerce_dataset(data["data"])
        return DataSet(tuple(coerce_series(name, value) for name, value in data.items()))
    if isinstance(data, Sequence) and not isinstance(data, (str, bytes, bytearray)):
        out: list[Series] = []
        for i, item in enumerate(data):
            if isinstance(item, Series):
                out.append(item)
            elif isinstance(item, Mapping):
                out.extend(coerce_series(name, value) for name, value in item.items())
            else:
                raise ChartDataError(f"unsupported data set entry at index {i}: {type(item)!r}")
        return DataSet(tuple(out))
    raise ChartDataError(f"unsupported data set input type: {type(data)!r}")


def _is_entry_list(value: Any) -> bool:
    if not isinstance(value, Sequence) or isinstance(value, (str, bytes, bytearray)):
        return False
    return all(isinstance(item, (Series, Mapping)) for item in value)


def coerce_series(name: Any, value: Any) -> Series:
    if isinstance(value, Series):
        if value.name != name:
            return Series(name=str(name), x=value.x, y=value.y)
        return value
    label = str(name)
    if pd is not None and isinstance(value, pd.Series):
        x = _coerce_1d_numeric(value.index.to_numpy(), label=f"{label}.x")
        y = _coerce_1d_numeric(value.to_numpy(), label=f"{label}.y")
        return Series(name=label, x=x, y=y)
    if isinstance(value, Mapping):
        if "x" not in value or "y" not in value:
            raise ChartDataError(f"series {label!r}: mapping input needs `x` and `y`")
        x = _coerce_1d_numeric(value["x"], label=f"{label}.x")
        y = _coerce_1d_numeric(value["y"], label=f"{label}.y")
        return Series(name=label, x=x, y=y)
    arr = _coerce_pairs(value, label=label)
    return Series(name=label, x=arr[:, 0], y=arr[:, 1])


def _from_dataframe(frame: Any) -> DataSet:
    x = _coerce_1d_numeric(frame.index.to_numpy(), label="index")
    out: list[Series] = []
    for column in frame.columns:
        if not _is_numeric_dtype(frame[column]):
            continue
        y = _coerce_1d_numeric(frame[column].to_numpy(), label=str(column))
        out.append(Series(name=str(column), x=x, y=y))
    if not out:
        raise ChartDataError("DataFrame has no numeric columns")
    return DataSet(tuple(out))


def _is_numeric_dtype(series: Any) -> bool:
    if pd is None:
        return False
    try:
        return bool(pd.api.types.is_numeric_dtype(series))
    except Exception:
        return False


def _coerce_pairs(value: Any, *, label: str) -> np.ndarray:
    if isinstance(value, np.ndarray):
        arr = value
    elif isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        arr = np.asarray([_coerce_pair(item, label=label, index=i) for i, item in enumerate(value)], dtype=np.float64)
    else:
        raise ChartDataError(f"unsupported {label} input type: {type(value)!r}")
    if arr.size == 0:
        raise ChartDataError(f"series {label!r}: empty series")
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ChartDataError(f"series {label!r}: points must have shape (N, 2)")
    return _coerce_ndarray(arr.reshape(-1), label=label).reshape(-1, 2)


def _coerce_pair(item: Any, *, label: str, index: int) -> tuple[float, float]:
    if isinstance(item, Mapping):
        item = (item.get("x"), item.get("y"))
    if not isinstance(item, Sequence) or isinstance(item, (str, bytes, bytearray)) or len(item) != 2:
        raise ChartDataError(f"series {label!r}: point {index} is not an (x, y) pair: {item!r}")
    return (_to_float(item[0], label=label, index=index), _to_float(item[1], label=label, index=index))


def _coerce_1d_numeric(value: Any, *, label: str) -> np.ndarray:
    if isinstance(value, np.ndarray):
        if value.ndim != 1:
            raise ChartDataError(f"{label} must be 1-D")
        return _coerce_ndarray(value, label=label)
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return _coerce_ndarray(np.asarray(value, dtype=object), label=label)
    raise ChartDataError(f"unsupported {label} input type: {type(value)!r}")


def _coerce_ndarray(arr: np.ndarray, *, label: str) -> np.ndarray:
    if arr.dtype.kind in {"i", "u", "f"}:
        return arr.astype(np.float64, copy=False)
    out = np.empty(arr.shape[0], dtype=np.float64)
    for i, raw in enumerate(arr.tolist()):
        out[i] = _to_float(raw, label=label, index=i)
    return out


def _to_float(raw: Any, *, label: str, index: int) -> float:
    if isinstance(raw, bool) or raw is None:
        raise ChartDataError(f"{label} contains non-numeric value at index {index}: {raw!r}")
    if isinstance(raw, Decimal):
        return float(raw)
    try:
        return float(raw)
    except (TypeError, ValueError) as exc:
        raise ChartDataError(f"{label} contains non-numeric value at index {index}: {raw!r}") from exc
