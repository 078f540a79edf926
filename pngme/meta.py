import logging
from enum import Enum, auto


class Endianess(Enum):
    LITTLE_ENDIAN = auto()
    BIG_ENDIAN    = auto()
    NETWORK       = auto()


class FieldDescriptor(object):
    """Wrapper around field access of a Struct related class.

    Accessed from the class it returns the field itself (the codec), accessed
    from an instance it returns the value stored for that field."""

    def __init__(self, field_instance: "Field", field_name: str):
        self.logger = logging.getLogger(f"{self.__module__}.{self.__class__.__name__}")
        self.field = field_instance
        self.field.name = field_name

    def __get__(self, instance, owner=None):
        if instance is None:
            return self.field

        data = instance.__dict__

        if self.field.name not in data:
            raise AttributeError(f"field '{self.field.name}' of '{owner.__name__}' has no value yet")

        return data[self.field.name]

    def __set__(self, instance, value):
        self.logger.debug("__set__ for field named '%s'", self.field.name)
        instance.__dict__[self.field.name] = value


class FieldBase(object):

    def contribute_to_struct(self, cls, name):
        if name in cls._meta.fields:
            raise AttributeError(f'field {name} is already present in class {cls.__name__}')

        cls._meta.fields.append(name)
        setattr(cls, name, FieldDescriptor(self, name))


class Meta(object):
    """Class containing metadata about the abstraction"""

    def __init__(self):
        self.fields = []


class MetaStruct(type):

    def __new__(cls, names, bases, attrs):
        '''Collect the declared fields in order, a little inspired by how Django does a similar thing.'''
        fields = {name: obj for name, obj in attrs.items() if hasattr(obj, 'contribute_to_struct')}
        new_attrs = {name: obj for name, obj in attrs.items() if name not in fields}

        new_cls = super(MetaStruct, cls).__new__(cls, names, bases, new_attrs)

        new_cls._meta = Meta()

        # handle inheritance
        parents = [_ for _ in bases if isinstance(_, MetaStruct)]
        for parent in parents:
            for obj_name in parent._meta.fields:
                if obj_name not in new_cls._meta.fields:
                    new_cls._meta.fields.append(obj_name)

        for obj_name, obj in fields.items():
            obj.contribute_to_struct(new_cls, obj_name)

        new_cls.logger = logging.getLogger(new_cls.__module__)

        return new_cls
