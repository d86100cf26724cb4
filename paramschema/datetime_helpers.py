# Copyright (c) 2013-2025 NASK. All rights reserved.

import datetime

from paramschema.regexes import (
    ISO_DATE_REGEX,
    ISO_TIME_REGEX,
    ISO_DATETIME_REGEX,
)


def is_aware(dt):
    """
    Check whether the given :class:`datetime.datetime` (or
    :class:`datetime.time`) is *TZ-aware*.

    >>> is_aware(datetime.datetime(2020, 1, 2, 3, 4, 5))
    False
    >>> is_aware(datetime.datetime(2020, 1, 2, 3, 4, 5, tzinfo=datetime.timezone.utc))
    True
    """
    if isinstance(dt, datetime.time):
        return dt.tzinfo is not None and dt.utcoffset() is not None
    return dt.tzinfo is not None and dt.tzinfo.utcoffset(dt) is not None


def datetime_utc_normalize(dt):
    """
    Normalize a *TZ-aware* :class:`datetime.datetime` to UTC (keeping
    it TZ-aware); a naive one is assumed to be UTC already.

    >>> tz = datetime.timezone(datetime.timedelta(hours=2))
    >>> datetime_utc_normalize(datetime.datetime(2013, 6, 6, 14, 13, 57, tzinfo=tz))
    datetime.datetime(2013, 6, 6, 12, 13, 57, tzinfo=datetime.timezone.utc)
    >>> datetime_utc_normalize(datetime.datetime(2013, 6, 6, 14, 13, 57))
    datetime.datetime(2013, 6, 6, 14, 13, 57, tzinfo=datetime.timezone.utc)
    """
    if is_aware(dt):
        return dt.astimezone(datetime.timezone.utc)
    return dt.replace(tzinfo=datetime.timezone.utc)


def parse_iso_date(s, prestrip=True):
    """
    Parse *ISO-8601*-formatted date (the extended ``YYYY-MM-DD`` form).

    Args:
        `s`: *ISO-8601*-formatted date as a `str`.

    Kwargs:
        `prestrip` (default: :obj:`True`):
            Whether the :meth:`strip` method should be called on the
            input string before performing the actual processing.

    Returns:
        A :class:`datetime.date` instance.

    Raises:
        :exc:`~exceptions.ValueError` for invalid input.

    >>> parse_iso_date('2013-06-12')
    datetime.date(2013, 6, 12)
    >>> parse_iso_date(' 2013-06-12 ')
    datetime.date(2013, 6, 12)

    >>> parse_iso_date('2013-02-31')     # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
      ...
    ValueError: ...
    >>> parse_iso_date('13-01-01')       # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
      ...
    ValueError: ...
    """
    if prestrip:
        s = s.strip()
    match = ISO_DATE_REGEX.match(s)
    if match:
        return _make_date_from_match(match)
    raise ValueError('could not parse {!a} as ISO date'.format(s))


def parse_iso_time(s, prestrip=True):
    """
    Parse *ISO-8601*-formatted time.

    Returns:
        A :class:`datetime.time` instance (a TZ-aware one if the input
        does include time zone information, otherwise a naive one).

    Raises:
        :exc:`~exceptions.ValueError` for invalid input.

    The time must include at least hour and minute; second, fraction
    of second and time zone designator are optional.  The fraction can
    be specified with any precision -- it is always transformed to
    microseconds.

    >>> parse_iso_time('10:02')
    datetime.time(10, 2)
    >>> parse_iso_time('10:02:04.1234')
    datetime.time(10, 2, 4, 123400)
    >>> parse_iso_time('10:02:04Z')
    datetime.time(10, 2, 4, tzinfo=datetime.timezone.utc)
    """
    if prestrip:
        s = s.strip()
    match = ISO_TIME_REGEX.match(s)
    if match:
        return _make_time_from_match(match)
    raise ValueError('could not parse {!a} as ISO time'.format(s))


def parse_iso_datetime(s, prestrip=True):
    """
    Parse *ISO-8601*-formatted combined date and time.

    Returns:
        A :class:`datetime.datetime` instance (a TZ-aware one if the
        input does include time zone information, otherwise a naive
        one).

    Raises:
        :exc:`~exceptions.ValueError` for invalid input.

    For notes about some limitations -- see :func:`parse_iso_date` and
    :func:`parse_iso_time`.

    >>> parse_iso_datetime('2013-06-13T10:02')
    datetime.datetime(2013, 6, 13, 10, 2)
    >>> parse_iso_datetime('2013-06-13 10:02:00+02:00')  # doctest: +NORMALIZE_WHITESPACE
    datetime.datetime(2013, 6, 13, 10, 2,
                      tzinfo=datetime.timezone(datetime.timedelta(seconds=7200)))
    """
    if prestrip:
        s = s.strip()
    match = ISO_DATETIME_REGEX.match(s)
    if match:
        d = _make_date_from_match(match)
        t = _make_time_from_match(match)
        return datetime.datetime.combine(d, t, tzinfo=t.tzinfo)
    raise ValueError('could not parse {!a} as ISO combined date + time'
                     .format(s))


def _make_date_from_match(match):
    g = match.groupdict()
    return datetime.date(int(g['year']),
                         int(g['month']),
                         int(g['day']))


def _make_time_from_match(match):
    g = match.groupdict()
    hour = int(g['hour'])
    minute = int(g['minute'])
    if g['secondfraction']:
        fract_str = g['secondfraction']
        microsecond = (int(fract_str) * 1000000) // (10 ** len(fract_str))
        microsecond = min(microsecond, 999999)  # must be less than million
    else:
        microsecond = 0
    if g['second']:
        second = int(g['second'])
        if second == 60:  # ISO 'leap second' -- not supported by datetime
            second = 59
            microsecond = 999999
    else:
        second = 0
    return datetime.time(hour, minute, second, microsecond, _make_tzinfo(g))


def _make_tzinfo(g):
    if not g['tz']:
        return None
    if g['tz'] == 'Z':
        return datetime.timezone.utc
    offset_minutes = int(g['tzhour']) * 60
    if g['tzminute']:
        tzminute = int(g['tzminute'])
        if tzminute > 59:
            raise ValueError('minute part {!a} in time zone designator '
                             'is out of range 00..59'.format(tzminute))
        offset_minutes += tzminute
    if g['tzsign'] == '-':
        offset_minutes = -offset_minutes
    if not offset_minutes:
        return datetime.timezone.utc
    return datetime.timezone(datetime.timedelta(minutes=offset_minutes))
