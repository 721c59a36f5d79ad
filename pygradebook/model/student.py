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

class Student (object):
    """A learner who can be graded.

    ``number`` is whatever registration number the school assigns; it
    only breaks ties between students sharing a name.

    >>> bilbo = Student(name='Bilbo Baggins', number='2011-0042')
    >>> print(bilbo)
    <Student Bilbo Baggins>
    >>> bilbo.number
    '2011-0042'
    >>> frodo = Student(name='Frodo Baggins')
    >>> [str(s) for s in sorted([frodo, bilbo])]
    ['<Student Bilbo Baggins>', '<Student Frodo Baggins>']

    Namesakes order by number, unnumbered students first:

    >>> twins = [Student(name='Sam', number=10), Student(name='Sam', number=9),
    ...          Student(name='Sam')]
    >>> [s.number for s in sorted(twins)]
    [None, 9, 10]
    """
    def __init__(self, name, number=None):
        self.name = name
        self.number = number

    def __str__(self):
        return '<{} {}>'.format(type(self).__name__, self.name)

    def __lt__(self, other):
        if self.name < other.name:
            return True
        elif other.name < self.name:
            return False
        if self.number is None or other.number is None:
            return self.number is None and other.number is not None
        return self.number < other.number
