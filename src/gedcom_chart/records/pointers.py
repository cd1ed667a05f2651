from __future__ import annotations


def pointer_to_id(pointer: str) -> str:
    """
    Return the identifier extracted from a pointer string.

    E.g. '@I123@' -> 'I123'. The delimiters are not validated; a token
    shorter than two characters yields an empty string.
    """
    return pointer[1:-1]
