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

import os.path as _os_path

from setuptools import setup as _setup

from pygradebook import __version__


_this_dir = _os_path.dirname(__file__)

_setup(
    name='pygradebook',
    version=__version__,
    maintainer='W. Trevor King',
    maintainer_email='wking@tremily.us',
    license = 'GNU General Public License (GPL)',
    platforms = ['all'],
    description = __doc__,
    long_description=open(_os_path.join(_this_dir, 'README'), 'r').read(),
    classifiers = [
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Education',
        'Operating System :: OS Independent',
        'License :: OSI Approved :: GNU General Public License (GPL)',
        'Programming Language :: Python :: 3',
        'Topic :: Education',
        ],
    python_requires='>=3.8',
    packages = ['pygradebook', 'pygradebook.model', 'pygradebook.test'],
    extras_require = {'test': ['pytest']},
    )
