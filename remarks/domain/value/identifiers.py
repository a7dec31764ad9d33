"""Strongly typed identifiers for comment entities.

Identifiers are opaque strings assigned by the record store, wrapped in
NewType so a post key can never be passed where a comment id is expected.
"""

from typing import NewType

CommentId = NewType("CommentId", str)

# Key of the content a comment is attached to (the post slug)
PostKey = NewType("PostKey", str)
