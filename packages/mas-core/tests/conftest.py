import pytest
from mas_core.codebase.deprecation import DeprecationConfig, reset_emitted, set_deprecation_config


@pytest.fixture(autouse=True)
def fresh_deprecations():
    """Every test starts in warn mode with no names announced yet."""
    set_deprecation_config(DeprecationConfig())
    reset_emitted()
    yield
    set_deprecation_config(DeprecationConfig())
    reset_emitted()
