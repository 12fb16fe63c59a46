"""Unit tests for the lazy top-level imports of the relayrank package."""

import pytest

import relayrank


class TestLazyImports:
    @pytest.mark.parametrize("name", relayrank.__all__)
    def test_resolves(self, name: str):
        assert getattr(relayrank, name) is not None

    def test_unknown_attribute(self):
        with pytest.raises(AttributeError):
            relayrank.DoesNotExist  # noqa: B018

    def test_dir(self):
        assert set(dir(relayrank)) == set(relayrank.__all__)

    def test_version(self):
        assert isinstance(relayrank.__version__, str)
