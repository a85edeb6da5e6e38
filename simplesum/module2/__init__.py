from .simple_class import SimpleClass2
