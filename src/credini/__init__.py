import credini.version
from _credini.document import Document, save
from _credini.exceptions import (
    CredIniError,
    KeyRotationError,
    MalformedSectionError,
    MissingCredentialError,
    ProfileNotFoundError,
)
from _credini.parser import parse
from _credini.profiles import Profile, Profiles, default_credentials_path
from _credini.reading import load, read
from _credini.rotation import rotate_access_key
from _credini.section import Section
from _credini.tokenizer import Token, TokenKind, tokenize
from _credini.writing import serialize, write

__version__ = credini.version.version

__all__ = [
    "CredIniError",
    "Document",
    "KeyRotationError",
    "MalformedSectionError",
    "MissingCredentialError",
    "Profile",
    "ProfileNotFoundError",
    "Profiles",
    "Section",
    "Token",
    "TokenKind",
    "default_credentials_path",
    "load",
    "parse",
    "read",
    "rotate_access_key",
    "save",
    "serialize",
    "tokenize",
    "write",
]
