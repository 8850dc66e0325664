"""Loader configuration.

``LoaderConfig`` holds the options for reading the text graph format and can
be stored as a small JSON file next to the data it describes.
"""

import inspect
import json
from numbers import Real
from pathlib import Path
from typing import Any

from typing_extensions import Self

# Types a public setting may hold
SCALAR_TYPES = (int, float, str, bool, type(None))


class Config:
    """Flat JSON-backed settings object.

    Public attributes are the settings and must be JSON scalars. Subclasses
    set them in ``__init__``; its parameter names double as the JSON keys.

    Examples
    --------
    >>> config = LoaderConfig(weighted=True)
    >>> config.save("loader.json")
    >>> LoaderConfig.load("loader.json").weighted
    True
    """

    def __setattr__(self, name: str, value: Any) -> None:
        if not name.startswith("_") and not isinstance(value, SCALAR_TYPES):
            raise TypeError(
                f"Setting '{name}' has invalid type {type(value).__name__}; "
                f"expected int, float, str, bool or None"
            )
        super().__setattr__(name, value)

    def to_dict(self) -> dict[str, Any]:
        """Public settings as a plain dict."""
        return {k: v for k, v in vars(self).items() if not k.startswith("_")}

    def save(self, path: str | Path) -> None:
        """Write the settings to ``path`` as JSON, replacing any existing file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> Self:
        """Build a config from ``config_dict``.

        Keys ``__init__`` does not take are ignored and absent keys keep their
        defaults.
        """
        params = inspect.signature(cls.__init__).parameters
        kwargs = {k: v for k, v in config_dict.items() if k in params and k != "self"}
        return cls(**kwargs)

    @classmethod
    def load(cls, path: str | Path) -> Self:
        """Read a config written by :meth:`save`.

        Raises
        ------
        FileNotFoundError
            If the file doesn't exist.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            return cls.from_dict(json.load(f))

    def __repr__(self) -> str:
        items = ", ".join(f"{k}={v!r}" for k, v in self.to_dict().items())
        return f"{self.__class__.__name__}({items})"

    def __eq__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.to_dict() == other.to_dict()


class LoaderConfig(Config):
    """Options for reading graphs from the whitespace-delimited text format.

    Parameters
    ----------
    weighted : bool, default=False
        Read ``(v1, v2, weight)`` triples instead of ``(v1, v2)`` pairs.
    encoding : str, default="utf-8"
        Text encoding used when opening files.
    default_weight : float, default=1.0
        Weight given to each edge read as a pair.
    """

    def __init__(
        self,
        weighted: bool = False,
        encoding: str = "utf-8",
        default_weight: float = 1.0,
    ):
        if not isinstance(weighted, bool):
            raise TypeError(f"weighted must be a bool, got {type(weighted).__name__}")
        if not isinstance(encoding, str) or not encoding:
            raise ValueError(f"encoding must be a non-empty string, got {encoding!r}")
        if isinstance(default_weight, bool) or not isinstance(default_weight, Real):
            raise TypeError(
                f"default_weight must be a number, got {type(default_weight).__name__}"
            )

        self.weighted = weighted
        self.encoding = encoding
        self.default_weight = float(default_weight)
