"""Key layout of a redirect record in the key-value store.

A record lives in three independent entries::

    redir_<id>   -> target URL
    key_<id>     -> edit key
    redirs       -> set holding one encoded member per record
"""

REDIRECT_PREFIX = "redir_"
EDIT_KEY_PREFIX = "key_"
REDIRECTS_SET = "redirs"


def redirect_key(record_id: str) -> str:
    return f"{REDIRECT_PREFIX}{record_id}"


def edit_key_key(record_id: str) -> str:
    return f"{EDIT_KEY_PREFIX}{record_id}"
