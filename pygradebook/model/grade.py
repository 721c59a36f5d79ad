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

from .. import LOG as _LOG


def _name(entity):
    return getattr(entity, 'name', entity)


class GradeRecord (object):
    """A student's average on one module element.

    The student and module element are stored by reference, and the
    average is stored exactly as given.  Nothing is validated.

    >>> from pygradebook.model.module import ModuleElement
    >>> from pygradebook.model.student import Student
    >>> bilbo = Student(name='Bilbo Baggins')
    >>> algebra = ModuleElement(name='Algebra', module='Mathematics')
    >>> record = GradeRecord(
    ...     student=bilbo, module_element=algebra, average=14.5)
    >>> print(record)
    <GradeRecord Bilbo Baggins:Algebra>
    >>> record.student is bilbo
    True
    >>> record.module_element is algebra
    True
    >>> record.average
    14.5

    Out-of-range averages are kept as well:

    >>> low = GradeRecord(student=bilbo, module_element=algebra, average=-5.0)
    >>> low.average
    -5.0

    Records are read-only once built:

    >>> record.average = 20.0  # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
      ...
    AttributeError: can't set attribute
    """
    def __init__(self, student, module_element, average):
        # never render the collaborators here
        _LOG.debug('recording average %s for %s on %s', average,
                   type(student).__name__, type(module_element).__name__)
        self._student = student
        self._module_element = module_element
        self._average = average

    @property
    def student(self):
        return self._student

    @property
    def module_element(self):
        return self._module_element

    @property
    def average(self):
        return self._average

    def __str__(self):
        return '<{} {}:{}>'.format(
            type(self).__name__, _name(self.student),
            _name(self.module_element))

    def __lt__(self, other):
        if self.student < other.student:
            return True
        elif other.student < self.student:
            return False
        return self.module_element < other.module_element
