"""Shared constants across the application"""

from urllib.parse import quote


class Endpoints:
    """Paths of the remote word-list service, relative to the base URL"""

    STARRED = "/starred"
    GRAVEYARD = "/graveyard"
    WRONG_ANSWERS = "/wrong-answers"
    MY_VOCABULARIES = "/my-vocabularies"

    # Fetched together by the initial load, in this order
    INITIAL_LOAD = (STARRED, GRAVEYARD, WRONG_ANSWERS, MY_VOCABULARIES)

    @staticmethod
    def member(collection: str, word_id: str) -> str:
        """Membership resource of ``word_id`` within ``collection``"""
        return f"{collection}/{quote(word_id, safe='')}"


class GatewayConstants:
    """Constants for authenticated requests"""

    GENERIC_FAILURE_MESSAGE = "Request failed"

    # Methods that always send a JSON content type, body or not
    MUTATING_METHODS = frozenset(["POST", "PUT", "PATCH", "DELETE"])

    JSON_CONTENT_TYPE = "application/json"

    RETRY_STATUS_FORCELIST = (502, 503, 504)
    # Only reads are retried; mutations reach the service at most once
    RETRY_ALLOWED_METHODS = ("GET",)
