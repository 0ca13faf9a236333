"""Legacy reader registry

Concrete reader classes register themselves here when they are defined;
registration order is the default reader order.
"""
import importlib
import inspect


def reader_id(rcls):
    """Identifier of a reader class: '<module>.<ClassName>'"""
    return '%s.%s' % (rcls.__module__, rcls.__name__)


class Registry(object):
    """Registry for legacy reader classes"""
    reader_registry = dict()

    @classmethod
    def register(cls, rcls):
        """Register reader class"""
        if not inspect.isabstract(rcls):
            cls.reader_registry[reader_id(rcls)] = rcls

    @classmethod
    def reader_ids(cls):
        return list(cls.reader_registry.keys())

    pass  # end class


def resolve_reader(identifier):
    """Return the reader class named by *identifier*

    The module part of the identifier is imported on demand, which registers
    any reader classes it defines.
    """
    try:
        return Registry.reader_registry[identifier]
    except KeyError:
        pass

    modname, _, clsname = identifier.rpartition('.')
    if not modname:
        raise ValueError('not a reader identifier: "%s"' % identifier)
    try:
        module = importlib.import_module(modname)
    except ImportError as e:
        raise ValueError('unknown reader: "%s"' % identifier) from e
    try:
        rcls = getattr(module, clsname)
    except AttributeError:
        raise ValueError('unknown reader: "%s"' % identifier)
    if not inspect.isclass(rcls) or inspect.isabstract(rcls):
        raise ValueError('not a concrete reader class: "%s"' % identifier)

    return rcls
