"""Packaging regression tests.

Tests that verify the package structure and version metadata.
"""

from pathlib import Path


def test_source_layout():
    """Test that the package lives under src/ with its kernel and internals."""
    here = Path(__file__).resolve().parent
    repo_root = here.parent
    src_pkg = repo_root / "src" / "gltfext"

    assert src_pkg.exists(), "gltfext package should exist in src/"
    assert (src_pkg / "kernel").exists(), "gltfext.kernel should exist"
    assert (src_pkg / "_internal").exists(), "gltfext._internal should exist"
    assert (repo_root / "pyproject.toml").exists()


def test_import_boundary():
    """Test that the installed package imports and reports a version."""
    import gltfext
    import gltfext.kernel  # noqa: F401

    # In dev mode it's "dev", in installed mode it's "1.0.0"
    assert gltfext.__version__ in ("1.0.0", "dev")
