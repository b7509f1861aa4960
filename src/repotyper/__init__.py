"""RepoTyper - touch-typing practice against your own source code"""

__version__ = "0.1.0"
