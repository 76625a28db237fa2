from __future__ import annotations

import sys


def test_cli_import_does_not_load_render_pipeline() -> None:
    before_modules = set(sys.modules)
    import cli  # noqa: F401

    newly_imported = set(sys.modules) - before_modules
    assert not any(
        name in {"artifacts.write", "render.context"}
        for name in newly_imported
    )
