from plotbox.adapters.normalize import coerce_1d, normalize_xy

__all__ = ["coerce_1d", "normalize_xy"]
