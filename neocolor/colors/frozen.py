from __future__ import annotations


class Frozen:
    """
    Mixin for sealed, immutable value classes.

    Subclasses declare their own ``__slots__`` (including ``'_is_frozen'``)
    and call ``self._freeze()`` at the end of ``__init__``. After that every
    assignment or deletion raises ``AttributeError``. Subclassing a concrete
    value class raises ``TypeError``.
    """
    __slots__ = ()

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        for base in cls.__mro__[1:]:
            if base is not Frozen and issubclass(base, Frozen):
                raise TypeError(f"{base.__name__} is sealed; subclassing is not supported")

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __delattr__(self, name):
        raise AttributeError(f"{self.__class__.__name__} is immutable; cannot delete {name}")

    def _freeze(self) -> None:
        super().__setattr__('_is_frozen', True)
