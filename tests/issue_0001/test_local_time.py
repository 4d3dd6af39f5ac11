# coding: utf-8
from datetime import datetime
from unittest.mock import Mock

import pytest
import pytz

from horae.defaults import FixedDefaults
from horae.engine import Style
from horae.errors import (
    ILLEGAL_ARGUMENT_ERROR,
    INVALID_FORMAT_ERROR,
    MISSING_RESOURCE_ERROR,
    FormatError,
    InvalidTimezoneError,
)
from horae.local_time import FIELDS, LocalTime
from horae.timezones import EngineZone, NamedZone

# 2021-09-21 19:50:12 UTC, a Tuesday
TIMESTAMP = 1632253812
INSTANT = datetime(2021, 9, 21, 19, 50, 12, tzinfo=pytz.utc)


def make_mock_engine():
    engine = Mock()
    engine.create_formatter.side_effect = lambda *_: Mock(
        **{'format.return_value': '42'}
    )
    return engine


def make_local_time(locale='en_US', timezone='Europe/Berlin'):
    lt = LocalTime(defaults=FixedDefaults('en_US', 'UTC'))
    lt.set_locale(locale)
    lt.set_timezone(NamedZone(timezone))
    return lt


def test_same_locale_twice_is_noop():
    engine = make_mock_engine()
    lt = LocalTime(engine, FixedDefaults('en_US'))

    lt.set_locale('de_DE')
    lt.format(INSTANT, 'y')
    lt.set_locale('de_DE')
    lt.format(INSTANT, 'y')

    assert engine.create_formatter.call_count == 1


def test_locale_change_invalidates():
    engine = make_mock_engine()
    lt = LocalTime(engine, FixedDefaults('en_US'))

    lt.set_locale('de_DE')
    lt.format(INSTANT, 'y')
    lt.get_full_day(INSTANT)
    lt.set_locale('fr_FR')
    lt.format(INSTANT, 'y')
    lt.get_full_day(INSTANT)

    assert [c[0] for c in engine.create_formatter.call_args_list] == [
        ('de_DE', Style.GREGORIAN, Style.GREGORIAN),
        ('de_DE', Style.FULL, Style.NONE),
        ('fr_FR', Style.GREGORIAN, Style.GREGORIAN),
        ('fr_FR', Style.FULL, Style.NONE),
    ]


def test_formatter_is_reused_and_reconfigured():
    engine = make_mock_engine()
    lt = LocalTime(engine, FixedDefaults('en_US'))
    tz = NamedZone('Europe/Berlin')
    lt.set_timezone(tz)

    lt.format(INSTANT, 'y')
    lt.format(INSTANT, 'LLLL')

    assert engine.create_formatter.call_count == 1

    # noinspection PyProtectedMember
    handle = lt._formatter
    assert handle.set_timezone.call_count == 2
    handle.set_timezone.assert_called_with(tz)
    assert [c[0][0] for c in handle.set_pattern.call_args_list] == \
        ['y', 'LLLL']


def test_same_timezone_is_noop():
    engine = make_mock_engine()
    lt = LocalTime(engine, FixedDefaults('en_US'))

    lt.set_timezone(NamedZone('Europe/Paris'))
    lt.format(INSTANT, 'y')
    lt.set_timezone(NamedZone('Europe/Paris'))
    lt.format(INSTANT, 'y')

    assert engine.create_formatter.call_count == 1


def test_same_engine_timezone_alias_is_noop():
    engine = make_mock_engine()
    lt = LocalTime(engine, FixedDefaults('en_US'))

    lt.set_timezone(EngineZone('US/Eastern'))
    lt.format(INSTANT, 'y')
    lt.set_timezone(EngineZone('America/New_York'))
    lt.format(INSTANT, 'y')

    assert engine.create_formatter.call_count == 1


def test_same_engine_timezone_other_case_is_noop():
    engine = make_mock_engine()
    lt = LocalTime(engine, FixedDefaults('en_US'))

    lt.set_timezone(EngineZone('europe/paris'))
    lt.format(INSTANT, 'y')
    lt.set_timezone(EngineZone('Europe/Paris'))
    lt.format(INSTANT, 'y')

    assert engine.create_formatter.call_count == 1
    assert lt.timezone.id == 'Europe/Paris'


def test_timezone_change_invalidates():
    engine = make_mock_engine()
    lt = LocalTime(engine, FixedDefaults('en_US'))

    lt.set_timezone(NamedZone('Europe/Paris'))
    lt.format(INSTANT, 'y')
    lt.set_timezone(NamedZone('Europe/Berlin'))
    lt.format(INSTANT, 'y')

    assert engine.create_formatter.call_count == 2


def test_set_invalid_timezone():
    lt = LocalTime(make_mock_engine(), FixedDefaults('en_US'))

    with pytest.raises(InvalidTimezoneError):
        lt.set_timezone('Europe/Paris')

    with pytest.raises(InvalidTimezoneError):
        lt.set_timezone(pytz.timezone('Europe/Paris'))

    assert lt.timezone is None


def test_set_timezone_of_other_kind():
    lt = LocalTime(make_mock_engine(), FixedDefaults('en_US'))
    lt.set_timezone(NamedZone('Europe/Paris'))

    with pytest.raises(InvalidTimezoneError):
        lt.set_timezone(EngineZone('Europe/Paris'))

    assert lt.timezone == NamedZone('Europe/Paris')


def test_default_resolution():
    engine = make_mock_engine()
    lt = LocalTime(engine, FixedDefaults('de_DE', 'Europe/Berlin'))

    assert lt.format(INSTANT, 'y') == '42'
    assert lt.locale == 'de_DE'
    assert lt.timezone == NamedZone('Europe/Berlin')
    engine.create_formatter.assert_called_once_with(
        'de_DE',
        Style.GREGORIAN,
        Style.GREGORIAN,
    )

    lt.set_locale('fr_FR')
    lt.format(INSTANT, 'y')
    lt.set_timezone(NamedZone('Europe/Paris'))
    lt.format(INSTANT, 'y')

    assert engine.create_formatter.call_count == 3


def test_default_resolution_with_babel():
    lt = LocalTime(defaults=FixedDefaults('de_DE', 'Europe/Berlin'))

    assert lt.get_time(INSTANT) == '21:50:12'

    lt.set_timezone(NamedZone('UTC'))
    assert lt.get_time(INSTANT) == '19:50:12'


def test_am_pm():
    lt = make_local_time('en_US')
    assert lt.wants_am_pm()
    assert lt.is_us_english()
    assert lt.get_time(TIMESTAMP) == '9:50:12 PM'
    assert lt.get_short_time(TIMESTAMP) == '9:50 PM'

    lt.set_locale('en_US.UTF-8')
    assert lt.wants_am_pm()
    assert lt.get_time(TIMESTAMP) == '9:50:12 PM'


def test_24h():
    lt = make_local_time('de_DE')
    assert not lt.wants_am_pm()
    assert not lt.is_us_english()
    assert lt.get_time(TIMESTAMP) == '21:50:12'
    assert lt.get_short_time(TIMESTAMP) == '21:50'

    # Known limitation: british english isn't in the list
    lt.set_locale('en_GB')
    assert lt.get_time(TIMESTAMP) == '21:50:12'


def test_timezone_is_applied():
    lt = make_local_time('en_US', 'America/New_York')
    assert lt.get_time(INSTANT) == '3:50:12 PM'

    lt.set_timezone(NamedZone('Asia/Tokyo'))
    assert lt.get_time(INSTANT) == '4:50:12 AM'
    assert lt.get_weekday_name(INSTANT) == 'Wednesday'


def test_day_in_month():
    lt = make_local_time('de_DE')
    instant = datetime(2021, 9, 3, 12, 0, tzinfo=pytz.utc)

    assert lt.get_day_in_month(instant) == '03'
    assert lt.get_numeric_day_in_month(instant) == 3


def test_week_of_year():
    lt = make_local_time('de_DE')

    assert lt.get_week_of_year(TIMESTAMP) == '38'
    assert lt.get_numeric_week_of_year(TIMESTAMP) == 38

    instant = datetime(2021, 1, 5, 12, 0, tzinfo=pytz.utc)
    assert lt.get_week_of_year(instant) == '01'
    assert lt.get_numeric_week_of_year(instant) == 1


def test_names():
    lt = make_local_time('en_US')

    assert lt.get_weekday_name(TIMESTAMP) == 'Tuesday'
    assert lt.get_short_weekday_name(TIMESTAMP) == 'Tue'
    assert lt.get_month_name(TIMESTAMP) == 'September'
    assert lt.get_short_month_name(TIMESTAMP) == 'Sep'

    lt.set_locale('fr_FR')
    assert lt.get_month_name(TIMESTAMP) == 'septembre'

    lt.set_locale('de_DE')
    assert lt.get_weekday_name(TIMESTAMP) == 'Dienstag'


def test_years():
    lt = make_local_time('en_US')

    assert lt.get_year(TIMESTAMP) == '2021'
    assert lt.get_short_year(TIMESTAMP) == '21'


def test_full_day():
    lt = make_local_time('en_US')
    assert lt.get_full_day(TIMESTAMP) == 'Tuesday, September 21, 2021'

    lt.set_locale('de_DE')
    assert lt.get_full_day(TIMESTAMP) == 'Dienstag, 21. September 2021'


def test_full_day_follows_timezone():
    lt = make_local_time('en_US', 'UTC')
    instant = datetime(2021, 9, 21, 23, 30, tzinfo=pytz.utc)

    assert lt.get_full_day(instant) == 'Tuesday, September 21, 2021'

    lt.set_timezone(NamedZone('Europe/Berlin'))
    assert lt.get_full_day(instant) == 'Wednesday, September 22, 2021'


def test_instant_types():
    lt = make_local_time('en_US', 'UTC')

    assert lt.format(TIMESTAMP, 'y-MM-dd HH:mm') == '2021-09-21 19:50'
    assert lt.format(float(TIMESTAMP), 'y-MM-dd HH:mm') == '2021-09-21 19:50'
    assert lt.format(INSTANT, 'y-MM-dd HH:mm') == '2021-09-21 19:50'
    assert lt.format(datetime(2021, 9, 21, 19, 50), 'y-MM-dd HH:mm') == \
        '2021-09-21 19:50'
    assert lt.format(INSTANT.date(), 'y-MM-dd HH:mm') == '2021-09-21 00:00'
    assert lt.format('2021-09-21T21:50:12+02:00', 'y-MM-dd HH:mm') == \
        '2021-09-21 19:50'


def test_format_error():
    lt = make_local_time('en_US')

    with pytest.raises(FormatError) as exc_info:
        lt.format(TIMESTAMP, 'dddd')

    assert exc_info.value.message
    assert exc_info.value.code == INVALID_FORMAT_ERROR
    assert 'dddd' in str(exc_info.value)
    assert lt.locale == 'en_US'
    assert lt.timezone == NamedZone('Europe/Berlin')
    assert lt.get_year(TIMESTAMP) == '2021'


def test_format_error_out_of_range():
    lt = make_local_time('en_US')

    with pytest.raises(FormatError) as exc_info:
        lt.format(10 ** 20, 'y')

    assert exc_info.value.code == ILLEGAL_ARGUMENT_ERROR


def test_format_error_unsupported_instant():
    lt = make_local_time('en_US')

    with pytest.raises(FormatError) as exc_info:
        lt.get_full_day([1, 2, 3])

    assert exc_info.value.code == ILLEGAL_ARGUMENT_ERROR


def test_format_error_unknown_locale():
    lt = make_local_time('xx_XX')

    with pytest.raises(FormatError) as exc_info:
        lt.get_year(TIMESTAMP)

    assert exc_info.value.code == MISSING_RESOURCE_ERROR
    assert lt.locale == 'xx_XX'

    lt.set_locale('en_US')
    assert lt.get_year(TIMESTAMP) == '2021'


def test_numeric_fields_need_numeric_output():
    engine = Mock()
    engine.create_formatter.return_value = Mock(
        **{'format.return_value': 'x'}
    )
    lt = LocalTime(engine, FixedDefaults('en_US'))

    with pytest.raises(ValueError):
        lt.get_numeric_week_of_year(INSTANT)

    with pytest.raises(ValueError):
        lt.get_numeric_day_in_month(INSTANT)

    assert lt.get_week_of_year(INSTANT) == 'x'


def test_get_field():
    lt = make_local_time('en_US')

    assert lt.get_field('short_time', TIMESTAMP) == '9:50 PM'
    assert lt.get_field('numeric_day_in_month', TIMESTAMP) == 21

    for name in FIELDS:
        assert lt.get_field(name, TIMESTAMP) is not None

    with pytest.raises(KeyError):
        lt.get_field('reset', TIMESTAMP)


def test_reset():
    engine = make_mock_engine()
    lt = LocalTime(engine, FixedDefaults('en_US'))

    lt.format(INSTANT, 'y')
    lt.reset()
    lt.format(INSTANT, 'y')

    assert engine.create_formatter.call_count == 2
