# This source code is part of the biogff package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "biogff"
__author__ = "The biogff contributors"
__all__ = ["Copyable"]

import abc


class Copyable(metaclass=abc.ABCMeta):
    """
    Base class for mutable containers that offer a :func:`copy()`
    method.

    A copy is made in two steps:
    :func:`__copy_create__()` instantiates an empty object of the same
    class and :func:`__copy_fill__()` transfers the state, walking up
    the class hierarchy so that every base class copies its own
    attributes.
    """

    def copy(self):
        """
        Copy the object.

        Returns
        -------
        copy
            A copy of this object.
        """
        clone = self.__copy_create__()
        self.__copy_fill__(clone)
        return clone

    def __copy_create__(self):
        """
        Instantiate a new, empty object of this class.

        Override this method if the constructor requires parameters.
        Do not call the `super()` method here.
        """
        return type(self)()

    def __copy_fill__(self, clone):
        """
        Copy the state of *self* into `clone`.

        Always call the `super()` method as first statement.
        """
        pass
