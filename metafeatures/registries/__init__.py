"""Name registries.

Measures, summarizers and landmarking learners are looked up by name here.
Built-ins are registered on first access and the registries are frozen
afterwards, so the catalog is fixed for the life of the process.
"""

from .learners import list_learners, make_learner
from .measures import GroupSpec, MeasureDescriptor, get_group, list_features, list_groups, resolve
from .summarizers import Summarizer, get_builtin_summarizer, list_summarizers
