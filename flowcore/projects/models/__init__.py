# ============================================
# projects/models/__init__.py
# ============================================
from .project import Project
from .sprint import Sprint
from .review import Review

__all__ = [
    'Project',
    'Sprint',
    'Review',
]
