"""Service layer for external consumers.

This module exposes PracticeService, a dictionary-in/dictionary-out
facade over the letter table and practice sessions for API integration
and offline replay of recorded drawings.

Example usage:
    ::

        from cursive_lib.api import PracticeService

        service = PracticeService()
        result = service.evaluate('a', 300, 400, drawing_json)
        if 'error' in result:
            print(result['error'])
"""

from .services import PracticeService

__all__ = ['PracticeService']
