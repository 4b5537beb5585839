import pytest

from thomaslate.textures import TextureHolder


class _CountingLoader:
    def __init__(self):
        self.calls = []

    def __call__(self, filename):
        self.calls.append(filename)
        return {"name": filename}


def test_same_file_is_loaded_once_and_shared():
    loader = _CountingLoader()
    holder = TextureHolder(loader)
    first = holder.get_texture("graphics/thomas.png")
    second = holder.get_texture("graphics/thomas.png")
    assert first is second
    assert loader.calls == ["graphics/thomas.png"]


def test_loader_result_is_returned():
    holder = TextureHolder(_CountingLoader())
    assert holder.get_texture("graphics/bob.png") == {"name": "graphics/bob.png"}


def test_different_files_are_cached_separately():
    loader = _CountingLoader()
    holder = TextureHolder(loader)
    a = holder.get_texture("graphics/background.png")
    b = holder.get_texture("graphics/tiles_sheet.png")
    holder.get_texture("graphics/background.png")
    assert a is not b
    assert loader.calls == ["graphics/background.png", "graphics/tiles_sheet.png"]


def test_failed_load_is_not_cached():
    attempts = []

    def flaky(filename):
        attempts.append(filename)
        if len(attempts) == 1:
            raise FileNotFoundError(filename)
        return "texture"

    holder = TextureHolder(flaky)
    with pytest.raises(FileNotFoundError):
        holder.get_texture("missing.png")
    assert holder.get_texture("missing.png") == "texture"
    assert len(attempts) == 2