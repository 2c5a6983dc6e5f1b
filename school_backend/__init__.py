"""
School Backend Package
======================

Flask-based REST backend for the school-management application.

Structure:
- routes/: API route blueprints
- grading.py / grade_scale.py: Percentage and letter-grade calculation
- store.py: In-memory grade record store
- navigation.py: Breadcrumb and section navigation helpers
- config.py: Configuration management
"""

from .config import config, Config

__version__ = "1.0.0"

__all__ = ['config', 'Config']
