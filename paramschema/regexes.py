# Copyright (c) 2013-2025 NASK. All rights reserved.

"""
Regular expression objects used to parse textual representations of
values (see :mod:`paramschema.datetime_helpers`).
"""


import re


ISO_DATE_REGEX = re.compile(
    # here we don't check ranges of particular values (e.g. that month is
    # in 01..12) because it is better to do it in functions that use this
    # regex (-> better debug information in case of incorrect input data)

    r'''
    \A
    (?P<year>
        \d{4}
    )
    -
    (?P<month>
        \d{2}
    )
    -
    (?P<day>
        \d{2}
    )
    \Z
    ''', re.ASCII | re.VERBOSE)


ISO_TIME_REGEX = re.compile(
    # (as above: ranges are checked by the functions that use this regex)

    r'''
    \A
    (?P<hour>
        \d{2}
    )
    :
    (?P<minute>
        \d{2}
    )
    (?:
        :
        (?P<second>
            \d{2}
        )
        (?:
            [.,]
            (?P<secondfraction>
                \d+
            )
        )?
    )?
    (?P<tz>
        Z
    |
        (?P<tzsign>
            [+-]
        )
        (?P<tzhour>
            \d{2}
        )
        (?:
            :?
            (?P<tzminute>
                \d{2}
            )
        )?
    )?
    \Z
    ''', re.ASCII | re.VERBOSE)


ISO_DATETIME_REGEX = re.compile(
    r'{date}[T\s]{time}'.format(date=ISO_DATE_REGEX.pattern.rstrip('Z\\ \r\n'),
                                time=ISO_TIME_REGEX.pattern.lstrip('A\\ \r\n')),
    re.ASCII | re.VERBOSE)
