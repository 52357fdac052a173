"""
Search query shaping for evidence retrieval.
"""

import re
from typing import Optional


MAX_QUERY_LENGTH = 100

_QUESTION_PREFIX = re.compile(r"^(what|who|when|where|why|how|tell me about|explain)\s+", re.IGNORECASE)
_CLAIM_PREFIX = re.compile(r"^(It is|It was|The|This is|This was)\s+", re.IGNORECASE)


def build_search_query(
    claim_text: str,
    user_prompt: Optional[str] = None,
    subject: Optional[str] = None,
) -> str:
    """
    Build the search query for a claim.

    - With a user prompt: the prompt minus its leading question word and
      trailing "?", followed by the claim.
    - With a subject: "<subject> <claim>".
    - Otherwise the claim without a leading "It is" / "The" / ...,
      truncated to MAX_QUERY_LENGTH characters.
    """
    if user_prompt:
        context_terms = _QUESTION_PREFIX.sub("", user_prompt)
        context_terms = re.sub(r"\?$", "", context_terms).strip()
        return f"{context_terms} {claim_text}"

    if subject:
        return f"{subject} {claim_text}"

    return _CLAIM_PREFIX.sub("", claim_text)[:MAX_QUERY_LENGTH]
