from . import option, result

__all__ = ("option", "result")
