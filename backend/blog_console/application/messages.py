"""Message keys selected by the console; the text comes from the localizer."""

from enum import Enum


class MessageKey(str, Enum):
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    INVALID_PAGINATION = "invalid_pagination"
    TITLE_REQUIRED = "title_required"
    CONTENT_REQUIRED = "content_required"
    DUPLICATED_PERMALINK = "duplicated_permalink"

    GET_SUCCEEDED = "get_succeeded"
    GET_FAILED = "get_failed"
    ADD_SUCCEEDED = "add_succeeded"
    ADD_FAILED = "add_failed"
    UPDATE_SUCCEEDED = "update_succeeded"
    UPDATE_FAILED = "update_failed"
    REMOVE_SUCCEEDED = "remove_succeeded"
    REMOVE_FAILED = "remove_failed"
    PUBLISH_SUCCEEDED = "publish_succeeded"
    PUBLISH_FAILED = "publish_failed"
    UNPUBLISH_SUCCEEDED = "unpublish_succeeded"
    UNPUBLISH_FAILED = "unpublish_failed"
    PUT_TOP_SUCCEEDED = "put_top_succeeded"
    PUT_TOP_FAILED = "put_top_failed"
    CANCEL_TOP_SUCCEEDED = "cancel_top_succeeded"
    CANCEL_TOP_FAILED = "cancel_top_failed"
