from diagram_paths import r2
from diagram_paths.config import GeometryConfig, get_geometry_config, set_geometry_config


def test_config_is_copied_on_get_and_set():
    original = get_geometry_config()
    try:
        mutated = get_geometry_config()
        mutated.tolerance = 0.5
        assert get_geometry_config().tolerance == original.tolerance

        config = GeometryConfig(tolerance=0.25)
        set_geometry_config(config)
        config.tolerance = 10.0
        assert get_geometry_config().tolerance == 0.25
    finally:
        set_geometry_config(original)


def test_tolerance_drives_default_comparisons():
    original = get_geometry_config()
    try:
        assert not r2(1, 0).is_close(r2(1.01, 0))
        set_geometry_config(GeometryConfig(tolerance=0.1))
        assert r2(1, 0).is_close(r2(1.01, 0))
    finally:
        set_geometry_config(original)
