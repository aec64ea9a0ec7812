"""Value holders that track whether they were set and can be sealed."""

from __future__ import annotations


class SealedError(RuntimeError):
    """Raised when setting a value that has been sealed."""


class UnsetError(RuntimeError):
    """Raised when reading a value that was never set."""


def _initial(args, default):
    if len(args) > 1:
        raise TypeError(f"expected at most one initial value, got {len(args)}")
    return (True, args[0]) if args else (False, default)


class CheckedGet:
    """A value that must be set before it is read.

    With ``caution`` on, reading an unset value raises :class:`UnsetError`
    and setting a sealed value raises :class:`SealedError`; with it off the
    checks and sealing are no-ops.
    """

    def __init__(self, *args, caution=True):
        self._caution = caution
        self._is_set, self._value = _initial(args, None)
        self._sealed = False

    def clear(self):
        self._is_set = False
        self._sealed = False
        self._value = None

    def get(self):
        if self._caution and not self._is_set:
            raise UnsetError("trying to get, but not set first")
        return self._value

    def set(self, value):
        if self._caution and self._sealed:
            raise SealedError("trying to set, but has previously been sealed")
        self._is_set = True
        self._value = value

    def force_set(self, value):
        self._is_set = True
        self._value = value

    def set_and_seal(self, value):
        self.set(value)
        self.seal()

    def seal(self):
        if self._caution:
            self._sealed = True

    def unseal(self):
        if self._caution:
            self._sealed = False

    def is_sealed(self):
        return self._caution and self._sealed

    def is_set(self):
        return self._is_set

    def copy(self):
        other = CheckedGet(caution=self._caution)
        other._is_set = self._is_set
        other._sealed = self._sealed
        other._value = self._value
        return other

    def __repr__(self):
        if not self._is_set:
            return "CheckedGet(<unset>)"
        return f"CheckedGet({self._value!r})"


class CheckedGetDefault:
    """A value that falls back to a default and can be sealed."""

    def __init__(self, default, *args, caution=True):
        self._caution = caution
        self._default = default
        _, self._value = _initial(args, default)
        self._sealed = False

    def clear(self):
        self._sealed = False
        self._value = self._default

    def get(self):
        return self._value

    def set(self, value):
        if self._caution and self._sealed:
            raise SealedError("trying to set, but has previously been sealed")
        self._value = value

    def set_and_seal(self, value):
        self.set(value)
        self.seal()

    def seal(self):
        if self._caution:
            self._sealed = True

    def unseal(self):
        if self._caution:
            self._sealed = False

    def is_sealed(self):
        return self._caution and self._sealed

    def copy(self):
        other = CheckedGetDefault(self._default, self._value, caution=self._caution)
        other._sealed = self._sealed
        return other

    def __repr__(self):
        return f"CheckedGetDefault({self._value!r}, default={self._default!r})"


class GetDefault:
    """A plain value that falls back to a default on :meth:`clear`."""

    def __init__(self, default, *args):
        self._default = default
        _, self._value = _initial(args, default)

    def clear(self):
        self._value = self._default

    def get(self):
        return self._value

    def set(self, value):
        self._value = value

    def copy(self):
        return GetDefault(self._default, self._value)

    def __repr__(self):
        return f"GetDefault({self._value!r}, default={self._default!r})"