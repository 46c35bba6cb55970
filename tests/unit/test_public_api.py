"""
Тесты публичного API пакета percent
"""

import percent as pkg
from percent import PercentErrorKind


class TestPublicApi:
    """Экспорт через __init__."""

    def test_all_names_resolve(self):
        for name in pkg.__all__:
            assert hasattr(pkg, name), name

    def test_scenarios_through_package(self):
        assert pkg.percent(25, 100) == (25.0, None)
        assert pkg.of(-200, -50) == (400.0, None)
        assert pkg.change(0, 100) == (0.0, PercentErrorKind.DIVIDE_BY_ZERO)
        assert pkg.remain(150, 100) == (0.0, PercentErrorKind.OUT_OF_RANGE)
        assert pkg.from_ratio(2) == (0.0, PercentErrorKind.OUT_OF_RANGE)
        assert pkg.to_ratio(50) == (0.5, None)
        assert pkg.of(150, 0) == (0.0, PercentErrorKind.DIVIDE_BY_ZERO)
