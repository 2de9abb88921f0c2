from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from typing import Any


class ConfigParam:
    """Base class of all kinds of configuration parameters.

    A `ConfigParam` holds a default value and filters candidate values.
    The current value itself lives on the owning config parser.
    """

    def __init__(self, default: Any):
        self._default = default
        self.name: str | None = None
        self.doc: str = ""

    @property
    def default(self) -> Any:
        return self._default

    def filter(self, value: Any) -> Any:
        """Return `value` if it is acceptable, otherwise raise `ValueError`."""
        return value


class EnumStr(ConfigParam):
    def __init__(self, default: str, options: Sequence[str]):
        if not isinstance(default, str):
            raise ValueError("EnumStr default must be string")
        self.all = (default, *options)
        for val in self.all:
            if not isinstance(val, str):
                raise ValueError(f"Non-str value '{val}' for an EnumStr parameter.")
        super().__init__(default)

    def filter(self, value):
        if value not in self.all:
            raise ValueError(
                f"Invalid value ('{value}') for configuration variable '{self.name}'. "
                f"Valid options are {self.all}"
            )
        return value

    def __str__(self):
        return f"{self.name} ({self.all}) "


class CollectionLiteralsConfigParser:
    """Object that holds configuration settings."""

    def __init__(self):
        # `__setattr__` is overridden, so internal state goes through `object`.
        object.__setattr__(self, "_config_var_dict", {})
        object.__setattr__(self, "_values", {})

    def add(self, name: str, doc: str, configparam: ConfigParam) -> None:
        """Add a new variable to this config parser."""
        if "." in name or "__" in name:
            raise ValueError(f"Invalid config variable name: {name}")
        if name in self._config_var_dict:
            raise AttributeError(f"Configuration variable '{name}' is already defined")
        configparam.name = name
        configparam.doc = doc
        self._config_var_dict[name] = configparam
        self._values[name] = configparam.filter(configparam.default)

    def __getattr__(self, name):
        values = object.__getattribute__(self, "_values")
        try:
            return values[name]
        except KeyError:
            raise AttributeError(
                f"{type(self).__name__} has no configuration variable '{name}'"
            ) from None

    def __setattr__(self, name, value):
        try:
            configparam = self._config_var_dict[name]
        except KeyError:
            raise AttributeError(
                f"{type(self).__name__} has no configuration variable '{name}'"
            ) from None
        self._values[name] = configparam.filter(value)

    def __dir__(self):
        return [*super().__dir__(), *self._config_var_dict]

    def __str__(self):
        lines = []
        for name, param in self._config_var_dict.items():
            lines.append(f"{name} ({type(param).__name__})")
            lines.append(f"    Doc:  {param.doc}")
            lines.append(f"    Value:  {self._values[name]!r}")
        return "\n".join(lines)

    @contextmanager
    def change_flags(self, **kwargs) -> Iterator[None]:
        """Temporarily set configuration flags.

        Usable both as a context manager and as a function decorator.
        All flags are validated before any of them is changed.

        Examples
        --------

            with config.change_flags(on_duplicate="warn"):
                make_set(1, 1)

        """
        new_values = {}
        for name, value in kwargs.items():
            try:
                configparam = self._config_var_dict[name]
            except KeyError:
                raise AttributeError(
                    f"{type(self).__name__} has no configuration variable '{name}'"
                ) from None
            new_values[name] = configparam.filter(value)

        old_values = {name: self._values[name] for name in new_values}
        self._values.update(new_values)
        try:
            yield
        finally:
            self._values.update(old_values)
