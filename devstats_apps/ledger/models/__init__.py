from .project import Project
from .repository import Repository
from .developer import Developer
from .commit import Commit, CommitQuerySet
