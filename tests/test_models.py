import pytest

from flatmover.errors import SettingsError
from flatmover.models import FlattenSettings


def test_defaults():
    s = FlattenSettings()
    assert (s.max_attempts, s.base_delay, s.cleanup_delay) == (5, 0.1, 0.5)


def test_backoff_doubles_each_attempt():
    s = FlattenSettings(base_delay=0.1)
    assert [s.backoff(n) for n in range(1, 5)] == pytest.approx([0.1, 0.2, 0.4, 0.8])


@pytest.mark.parametrize("kwargs", [{"max_attempts": 0}, {"base_delay": -1}, {"cleanup_delay": -0.1}])
def test_invalid_settings(kwargs):
    with pytest.raises(SettingsError):
        FlattenSettings(**kwargs)
