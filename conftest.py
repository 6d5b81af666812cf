import pytest


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: encodes large images")
    config.addinivalue_line("markers", "pillow: cross-checks output with Pillow's PNG decoder")


def pytest_collection_modifyitems(config, items):
    try:
        import PIL  # noqa: F401
        has_pillow = True
    except Exception:
        has_pillow = False

    if has_pillow:
        return

    skip_pillow = pytest.mark.skip(reason="Pillow not installed; skipping decoder cross-checks")
    for item in items:
        if "pillow" in item.keywords:
            item.add_marker(skip_pillow)
