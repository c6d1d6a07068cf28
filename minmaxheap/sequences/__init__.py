import os
import inspect
import importlib
from minmaxheap.core import HeapSequence

SEQUENCE_REGISTRY = {}

sequences_dir = os.path.dirname(__file__)
for file in sorted(os.listdir(sequences_dir)):
    if not file.startswith('_') and not file.startswith('.') and file.endswith('.py'):
        module_name = file[:file.find('.py')]
        module = importlib.import_module('minmaxheap.sequences.' + module_name)
        clsmembers = inspect.getmembers(module, inspect.isclass)
        for name, _cls in clsmembers:
            if issubclass(_cls, HeapSequence) and not _cls == HeapSequence:
                if not hasattr(_cls, 'name'):
                    raise ValueError("All sequence classes must have `name` attribute. Culprit: {}".format(name))
                else:
                    SEQUENCE_REGISTRY[_cls.name] = _cls
