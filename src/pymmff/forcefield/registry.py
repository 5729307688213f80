"""
Name-based registries for force fields and parameter formats.

Factories are registered under a lowercase name and constructed with
:meth:`Registry.create`, which returns a :class:`Result` so that an
unknown name has to be handled by the caller.
"""
from typing import Any, Callable, Dict, Generic, List, Type, TypeVar

from pymmff.core import MmffError, Result, UnknownForceFieldError, UnknownFormatError

T = TypeVar("T")


class Registry(Generic[T]):
    """
    Mapping from names to factories for one kind of object.

    Attributes:
        kind: Human-readable name of what is registered (for messages).

    Example:
        >>> from pymmff.forcefield import force_fields
        >>> result = force_fields.create("mmff")
        >>> result.ok
        True
        >>> force_fields.create("uff").error
        "Force field 'uff' is not supported. Choose from: mmff"
    """

    def __init__(self, kind: str, error_type: Type[MmffError] = MmffError) -> None:
        self.kind = kind
        self.error_type = error_type
        self._factories: Dict[str, Callable[..., T]] = {}

    def register(self, name: str, factory: Callable[..., T], replace: bool = False) -> None:
        """
        Register ``factory`` under ``name``.

        Raises:
            ValueError: If ``name`` is taken and ``replace`` is False.
        """
        key = name.lower()
        if key in self._factories and not replace:
            raise ValueError(f"{self.kind.capitalize()} '{name}' is already registered")
        self._factories[key] = factory

    def unregister(self, name: str) -> bool:
        return self._factories.pop(name.lower(), None) is not None

    def names(self) -> List[str]:
        return sorted(self._factories)

    def create(self, name: str, **kwargs: Any) -> Result[T]:
        """Construct the object registered under ``name``."""
        factory = self._factories.get(name.lower())
        if factory is None:
            return Result.failure(
                f"{self.kind.capitalize()} '{name}' is not supported. "
                f"Choose from: {', '.join(self.names()) or '(none)'}"
            )
        return Result.success(factory(**kwargs))

    def create_or_raise(self, name: str, **kwargs: Any) -> T:
        """Like :meth:`create` but raises :attr:`error_type` for unknown names."""
        result = self.create(name, **kwargs)
        if not result.ok:
            raise self.error_type(result.error)
        return result.value  # type: ignore[return-value]

    def __contains__(self, name: str) -> bool:
        return name.lower() in self._factories

    def __len__(self) -> int:
        return len(self._factories)


force_fields: "Registry[Any]" = Registry("force field", UnknownForceFieldError)
formats: "Registry[Any]" = Registry("parameter format", UnknownFormatError)
