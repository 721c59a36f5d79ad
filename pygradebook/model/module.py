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

class ModuleElement (object):
    """A gradable component of a course module.

    >>> algebra = ModuleElement(name='Algebra', module='Mathematics')
    >>> print(algebra)
    <ModuleElement Mathematics/Algebra>
    >>> print(ModuleElement(name='Optics'))
    <ModuleElement Optics>
    """
    def __init__(self, name, module=None):
        self.name = name
        self.module = module

    def path(self):
        """Return the element's name qualified by its module, if any

        >>> ModuleElement(name='Algebra', module='Mathematics').path()
        'Mathematics/Algebra'
        >>> ModuleElement(name='Optics').path()
        'Optics'
        """
        if self.module:
            return '{}/{}'.format(self.module, self.name)
        return self.name

    def __str__(self):
        return '<{} {}>'.format(type(self).__name__, self.path())

    def __lt__(self, other):
        """Order elements by module, then by name

        >>> algebra = ModuleElement(name='Algebra', module='Mathematics')
        >>> analysis = ModuleElement(name='Analysis', module='Mathematics')
        >>> optics = ModuleElement(name='Optics', module='Physics')
        >>> [e.name for e in sorted([optics, analysis, algebra])]
        ['Algebra', 'Analysis', 'Optics']
        """
        smodule = self.module or ''
        omodule = other.module or ''
        if smodule < omodule:
            return True
        elif omodule < smodule:
            return False
        return self.name < other.name
