"""A cache that loads each texture file once and hands out the shared result."""

from __future__ import annotations

from typing import Any, Callable


class TextureHolder:
    """Loads textures through ``loader`` and keeps them keyed by file name."""

    def __init__(self, loader: Callable[[str], Any]) -> None:
        self._loader = loader
        self._textures: dict[str, Any] = {}

    def get_texture(self, filename: str) -> Any:
        """Return the texture for ``filename``, loading it on first request.

        A loader error propagates and nothing is cached, so a later call
        tries the load again.
        """
        try:
            return self._textures[filename]
        except KeyError:
            texture = self._loader(filename)
            self._textures[filename] = texture
            return texture