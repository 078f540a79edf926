import logging


class Dependency:
    '''This makes the relation between fields possible.

    In practice this class allows to write something like

        class Simple(Struct):
            length = fields.StructField('I')
            data = fields.StringField(Dependency('.length'))

    and have the length of the string contained in the field named 'data'
    read from the field named 'length' of the same record.

    The leading '.' indicates we refer to a field at the same level, the
    only kind of resolution records in this package need.
    '''
    def __init__(self, expression):
        if not expression.startswith('.'):
            raise ValueError(f"only sibling dependencies are supported, got '{expression}'")

        self.expression = expression
        self.logger = logging.getLogger(__name__)

    def __repr__(self):
        return f'<{self.__class__.__name__}({self.expression})>'

    @property
    def field_name(self):
        return self.expression[1:]

    def resolve(self, instance):
        '''With this method we resolve the attribute with respect to the instance
        passed as argument.'''
        value = getattr(instance, self.field_name)

        self.logger.debug(' resolved \'%s\' with value %s' % (self.expression, value))

        return value
