"""
API Routes package
"""
from . import auth, problems, notes, analyses, ai_assistant, compiler, leetcode, admin

__all__ = ['auth', 'problems', 'notes', 'analyses', 'ai_assistant', 'compiler', 'leetcode', 'admin']
