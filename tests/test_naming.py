"""
Tests for colour-name lookup.
"""
from palettekit.naming import CSSNameResolver, fetch_color_name, with_name
from palettekit.types import ColorItem


class NullResolver:
    def lookup(self, hex_value):
        return None


class TestCSSNameResolver:
    def test_exact_match(self):
        assert CSSNameResolver().lookup("#ff0000") == "red"

    def test_nearest_match(self):
        assert CSSNameResolver().lookup("#fe0101") == "red"

    def test_ties_resolve_alphabetically(self):
        # gray and grey share the same RGB value
        assert CSSNameResolver().lookup("#808080") == "gray"


class TestFetchColorName:
    def test_default_resolver(self):
        assert fetch_color_name(ColorItem.from_rgb((0, 0, 255))) == "blue"

    def test_falls_back_to_hex(self):
        item = ColorItem.from_rgb((1, 2, 3))
        assert fetch_color_name(item, NullResolver()) == "#010203"

    def test_with_name_returns_copy(self):
        item = ColorItem.from_rgb((255, 255, 255))
        named = with_name(item)
        assert named.name == "white"
        assert item.name is None
        assert named.hex == item.hex


class TestDefaultResolver:
    def test_built_once_at_import(self):
        from palettekit import naming

        assert isinstance(naming._default_resolver, CSSNameResolver)
        assert naming._resolver(None) is naming._default_resolver

    def test_explicit_resolver_wins(self):
        resolver = NullResolver()
        from palettekit import naming

        assert naming._resolver(resolver) is resolver
