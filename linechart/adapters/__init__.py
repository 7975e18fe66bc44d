from .inputs import coerce_dataset, coerce_series

__all__ = ["coerce_dataset", "coerce_series"]
