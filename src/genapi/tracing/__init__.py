from ._traced import get_tracer, traced  # noqa: D104

__all__ = ["get_tracer", "traced"]
