#########################################################################################
##
##                              OBSERVABLE PARAMETER DECORATOR
##                                 (utils/observable.py)
##
##         Class decorator that turns the __init__ parameters of a configuration
##         object into observable attributes. Listeners linked to a parameter are
##         called with the new value whenever it changes at runtime.
##
#########################################################################################

# IMPORTS ===============================================================================

import inspect
import functools


# HELPERS ===============================================================================

_UNSET = object()


def _check_param(obj, name):
    """Raise if 'name' is not an observable parameter of 'obj'."""
    if name not in type(obj)._observable_params:
        raise AttributeError(
            f"'{type(obj).__name__}' has no observable parameter '{name}'"
            )


def _notify(obj, name, value):
    """Call all listeners of parameter 'name' with 'value'.

    Iterates over a copy, listeners may unlink themselves.
    """
    for callback in list(obj._listeners.get(name, ())):
        callback(value)


def _restore(obj, old_values):
    """Assign 'old_values' silently and notify them again.

    Listeners that already accepted a rejected value are brought back to
    the previous one.
    """
    obj._param_locked = False
    try:
        for name, value in old_values.items():
            setattr(obj, name, value)
    finally:
        obj._param_locked = True

    for name, value in old_values.items():
        _notify(obj, name, value)


# DECORATOR =============================================================================

def observable(cls):
    """Class decorator that makes all ``__init__`` parameters observable.

    Parameters are auto-detected from the ``__init__`` signature. Assignments
    during ``__init__`` are silent, afterwards every assignment of a different
    value notifies the linked listeners.

    The decorator generates the methods

    * ``link(name, callback)`` register a listener, it is called immediately
      with the current value
    * ``unlink(name, callback)`` remove a listener
    * ``set(**kwargs)`` batched update, listeners are notified once per changed
      parameter after all values are assigned
    * ``reset()`` restore the values from construction

    If a listener raises, the previous value is restored, the listeners are
    notified with it again and the exception propagates.

    Example
    -------
    .. code-block:: python

        @observable
        class Settings:
            def __init__(self, timestep=1e-3):
                self.timestep = timestep

        settings = Settings()
        settings.link("timestep", print)   # prints 0.001
        settings.timestep = 1e-4           # prints 0.0001
    """

    original_init = cls.__init__

    # auto-detect all __init__ parameters
    params = [
        name for name in inspect.signature(original_init).parameters
        if name != "self"
        ]

    # -- install property descriptors for all params -------------------------------

    for name in params:
        storage = f"_p_{name}"

        def _make_property(n, s):
            def getter(self):
                return getattr(self, s)

            def setter(self, value):
                old = getattr(self, s, _UNSET)
                setattr(self, s, value)
                if getattr(self, '_param_locked', False) and (old is _UNSET or old != value):
                    try:
                        _notify(self, n, value)
                    except Exception:
                        if old is not _UNSET:
                            _restore(self, {n: old})
                        raise

            return property(getter, setter)

        setattr(cls, name, _make_property(name, storage))

    # -- wrap __init__ with depth counter ------------------------------------------

    @functools.wraps(original_init)
    def new_init(self, *args, **kwargs):
        self._init_depth = getattr(self, '_init_depth', 0) + 1
        try:
            original_init(self, *args, **kwargs)
        finally:
            self._init_depth -= 1
        if self._init_depth == 0:
            self._listeners = getattr(self, '_listeners', {})
            self._initial_values = {
                p: getattr(self, p) for p in type(self)._observable_params
                }
            self._param_locked = True

    cls.__init__ = new_init

    # -- generate listener management ----------------------------------------------

    def link(self, name, callback):
        """Register 'callback' for parameter 'name' and call it with the
        current value.

        Parameters
        ----------
        name : str
            parameter name
        callback : callable
            called with the new value

        Returns
        -------
        callback : callable
            the registered callback, for unlinking
        """
        _check_param(self, name)
        self._listeners.setdefault(name, []).append(callback)
        callback(getattr(self, name))
        return callback


    def unlink(self, name, callback):
        """Remove 'callback' from the listeners of parameter 'name'.

        Parameters
        ----------
        name : str
            parameter name
        callback : callable
            previously linked callback
        """
        _check_param(self, name)
        self._listeners.get(name, []).remove(callback)


    def set(self, **kwargs):
        """Set multiple parameters and notify once per changed parameter.

        Parameters
        ----------
        kwargs : dict
            parameter names and their new values
        """
        for key in kwargs:
            _check_param(self, key)

        changed, previous = {}, {}
        self._param_locked = False
        try:
            for key, value in kwargs.items():
                if getattr(self, key) != value:
                    changed[key] = value
                    previous[key] = getattr(self, key)
                setattr(self, key, value)
        finally:
            self._param_locked = True

        try:
            for key, value in changed.items():
                _notify(self, key, value)
        except Exception:
            _restore(self, previous)
            raise


    def reset(self):
        """Restore the parameter values from construction."""
        self.set(**self._initial_values)

    cls.link = link
    cls.unlink = unlink
    cls.set = set
    cls.reset = reset

    # -- store metadata for introspection ------------------------------------------

    existing = getattr(cls, '_observable_params', ())
    cls._observable_params = existing + tuple(p for p in params if p not in existing)

    return cls
