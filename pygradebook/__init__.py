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

"Record students' averages on course module elements."

import logging as _logging

from .color import ColoredFormatter as _ColoredFormatter


__version__ = '0.1'


LOG = _logging.getLogger('pygradebook')
LOG.setLevel(_logging.ERROR)
LOG.addHandler(_logging.StreamHandler())
LOG_FORMATTER = _ColoredFormatter()
LOG.handlers[0].setFormatter(LOG_FORMATTER)
