"""Verify package imports work correctly."""


def test_import_mdbook_footnote() -> None:
    """Test that mdbook_footnote can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import mdbook_footnote

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert mdbook_footnote.__version__ == expected


def test_version_format() -> None:
    """Test version string format."""
    from mdbook_footnote import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


def test_public_api_exports() -> None:
    """Everything in __all__ is importable from the package root."""
    import mdbook_footnote

    for name in mdbook_footnote.__all__:
        assert hasattr(mdbook_footnote, name), name
