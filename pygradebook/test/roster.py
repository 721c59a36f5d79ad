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

from pygradebook.model.module import ModuleElement as _ModuleElement
from pygradebook.model.student import Student as _Student


STUDENTS = [
    ('Bilbo Baggins', '2011-0042'),
    ('Frodo Baggins', '2011-0043'),
    ('Aragorn', None),
    ]

MODULE_ELEMENTS = [
    ('Algebra', 'Mathematics'),
    ('Analysis', 'Mathematics'),
    ('Optics', 'Physics'),
    ('Mechanics', 'Physics'),
    ]


class StubRoster (object):
    """Students and module elements for testing.

    >>> roster = StubRoster()
    >>> print(roster.student('Aragorn'))
    <Student Aragorn>
    >>> print(roster.element('Optics'))
    <ModuleElement Physics/Optics>
    >>> roster.student('Sauron')
    Traceback (most recent call last):
      ...
    ValueError: Sauron
    """
    def __init__(self):
        self.students = [
            _Student(name=name, number=number) for name,number in STUDENTS]
        self.elements = [
            _ModuleElement(name=name, module=module)
            for name,module in MODULE_ELEMENTS]

    def student(self, name):
        for student in self.students:
            if student.name == name:
                return student
        raise ValueError(name)

    def element(self, name):
        for element in self.elements:
            if element.name == name:
                return element
        raise ValueError(name)
