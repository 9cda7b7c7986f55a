"""
wordlist-sync - optimistic synchronization of starred, graveyard and
wrong-answer word lists against a remote word-list service
"""

__version__ = "1.0.0"
__description__ = "Optimistic word-list synchronization engine with rollback"

from .core.factory import create_word_list_session

__all__ = ["create_word_list_session"]
