class CredIniError(Exception):
    """
    Base class of the errors raised by credini.
    """

    pass


class MalformedSectionError(CredIniError, ValueError):
    """
    Raised by the parser if a section header is not followed by a name,
    ie. the file ends with '[' or contains '[['.
    """

    pass


class ProfileNotFoundError(CredIniError, KeyError):
    """
    Raised when no section in the credentials file has the requested name.
    """

    def __str__(self):
        return f"could not find profile {self.args[0]}"


class MissingCredentialError(CredIniError):
    """
    Raised when a profile lacks one of the keys required to use it.
    """

    pass


class KeyRotationError(CredIniError):
    """
    Raised when the old access key could not be deleted after a new one
    was created. The profile already holds the new key at that point.
    """

    pass
