import pendulum
import pytest

from superscriber.lib import datetime as apple_datetime


def test_parse_apple_successes():
    dt = apple_datetime.parse_apple('2013-08-01 07:00:00 Etc/GMT')
    assert dt == pendulum.datetime(2013, 8, 1, 7, 0, 0, tz='UTC')
    assert dt.timezone_name == 'UTC'

    # the *_pst fields come with a non-utc timezone
    dt = apple_datetime.parse_apple('2020-03-09 10:06:38 America/Los_Angeles')
    assert dt == pendulum.datetime(2020, 3, 9, 17, 6, 38, tz='UTC')

    # epoch milliseconds
    dt = apple_datetime.parse_apple('1583773598000')
    assert dt == pendulum.datetime(2020, 3, 9, 17, 6, 38, tz='UTC')


def test_parse_apple_not_applicable():
    assert apple_datetime.parse_apple(None) is None
    assert apple_datetime.parse_apple('') is None


def test_parse_apple_failures():
    with pytest.raises(ValueError):
        apple_datetime.parse_apple('2013-08-01T07:00:00Z')

    with pytest.raises(ValueError):
        apple_datetime.parse_apple('2013-08-01 07:00:00')

    with pytest.raises(ValueError):
        apple_datetime.parse_apple('2013-08-01 07:00:00 Not/AZone')

    with pytest.raises(ValueError):
        apple_datetime.parse_apple(1583773598000)

    # trailing characters after the timezone name
    with pytest.raises(ValueError):
        apple_datetime.parse_apple('2013-08-01 07:00:00 Etc/GMT\n')


@pytest.mark.parametrize('dt_str', ['9' * 20, '9' * 400])
def test_parse_apple_milliseconds_out_of_range(dt_str):
    with pytest.raises(ValueError, match='out of range'):
        apple_datetime.parse_apple(dt_str)


def test_serialize():
    assert apple_datetime.serialize(None) is None

    dt = pendulum.datetime(2013, 8, 1, 7, 0, 0, tz='UTC')
    assert apple_datetime.serialize(dt) == '2013-08-01T07:00:00Z'

    dt = pendulum.datetime(2013, 8, 1, 8, 0, 0, tz='Europe/London')
    assert apple_datetime.serialize(dt) == '2013-08-01T07:00:00Z'
