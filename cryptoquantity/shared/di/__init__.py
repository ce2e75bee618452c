from .container import Container, get_container

__all__ = ["Container", "get_container"]
