# Copyright (C) 2012 W. Trevor King <wking@tremily.us>
#
# This file is part of pygradebook.
#
# pygradebook is free software: you can redistribute it and/or modify it
# under the terms of the GNU General Public License as published by the Free
# Software Foundation, either version 3 of the License, or (at your option)
# any later version.
#
# pygradebook is distributed in the hope that it will be useful, but WITHOUT
# ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or
# FITNESS FOR A PARTICULAR PURPOSE.  See the GNU General Public License for
# more details.
#
# You should have received a copy of the GNU General Public License along with
# pygradebook.  If not, see <http://www.gnu.org/licenses/>.

"Colorize pygradebook's log output with ANSI escape sequences."

import logging as _logging


# Foreground colors, in ANSI escape code order
_COLORS = [
    'black', 'red', 'green', 'yellow', 'blue', 'magenta', 'cyan', 'white']

USE_COLOR = True
LEVEL_COLORS = [
    (_logging.DEBUG, 'blue'),
    (_logging.INFO, None),
    (_logging.WARNING, 'yellow'),
    ]
ALERT_COLOR = 'red'


def level_color(levelno):
    """Return the color for log records at level ``levelno``

    >>> import logging
    >>> level_color(logging.DEBUG)
    'blue'
    >>> print(level_color(logging.INFO))
    None
    >>> level_color(logging.WARNING)
    'yellow'

    Anything more severe than a warning gets the alert color:

    >>> level_color(logging.ERROR)
    'red'
    >>> level_color(logging.CRITICAL)
    'red'
    """
    for threshold,color in LEVEL_COLORS:
        if levelno <= threshold:
            return color
    return ALERT_COLOR

def _ansi_color_code(color):
    r"""Return the ANSI escape sequence selecting ``color``

    >>> _ansi_color_code('yellow')
    '\x1b[33m'
    >>> _ansi_color_code(None)
    '\x1b[0m'
    """
    if color is None:
        return '\033[0m'
    return '\033[3{}m'.format(_COLORS.index(color))

def color_string(string, color=None):
    r"""Wrap ``string`` in ANSI escape sequences for ``color``

    >>> color_string('Bilbo Baggins', 'blue')
    '\x1b[34mBilbo Baggins\x1b[0m'
    >>> color_string('Bilbo Baggins')
    'Bilbo Baggins'
    """
    if not color:
        return string
    return ''.join([_ansi_color_code(color), string, _ansi_color_code(None)])


class ColoredFormatter (_logging.Formatter):
    r"""Log formatter that colors each record by its level

    >>> import logging
    >>> formatter = ColoredFormatter('%(levelname)s: %(message)s')
    >>> record = logging.LogRecord(
    ...     'pygradebook', logging.WARNING, 'color.py', 1,
    ...     'average -5.0 for Bilbo Baggins', None, None)
    >>> formatter.colored = False
    >>> formatter.format(record)
    'WARNING: average -5.0 for Bilbo Baggins'
    >>> formatter.colored = True
    >>> formatter.format(record)
    '\x1b[33mWARNING: average -5.0 for Bilbo Baggins\x1b[0m'
    """
    def __init__(self, *args, **kwargs):
        super(ColoredFormatter, self).__init__(*args, **kwargs)
        self.colored = None  # `None` to use USE_COLOR; True/False to override

    def format(self, record):
        s = super(ColoredFormatter, self).format(record)
        colored = self.colored
        if colored is None:
            colored = USE_COLOR
        if colored:
            return color_string(string=s, color=level_color(record.levelno))
        return s
