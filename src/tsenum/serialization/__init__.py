"""
Serialization — Moving enumeration members across process boundaries.

Members pickle by reference and are canonicalized on load. For text
formats they travel as MemberRef (family tag, label) pairs.
"""

from tsenum.serialization.refs import MemberRef, dumps, loads
from tsenum.serialization.schema import member_core_schema, member_json_schema

__all__ = [
    "MemberRef",
    "dumps",
    "loads",
    "member_core_schema",
    "member_json_schema",
]
