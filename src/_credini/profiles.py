"""
Profiles are the sections of an AWS shared credentials file, each holding
an access key id and a secret access key.
"""

import logging
import os
import shlex
from pathlib import Path

from _credini.exceptions import MissingCredentialError, ProfileNotFoundError

logger = logging.getLogger(__name__)

ACCESS_KEY_ID = "aws_access_key_id"
SECRET_ACCESS_KEY = "aws_secret_access_key"
CREDENTIALS_FILE_VARIABLE = "AWS_SHARED_CREDENTIALS_FILE"


def default_credentials_path():
    """
    :returns: The path given by $AWS_SHARED_CREDENTIALS_FILE,
        or ~/.aws/credentials if it is not set.
    """
    path = os.environ.get(CREDENTIALS_FILE_VARIABLE)
    if path:
        return Path(path).expanduser()
    return Path.home() / ".aws" / "credentials"


class Profile:
    def __init__(self, section):
        self.section = section

    @property
    def name(self):
        return self.section.name

    @property
    def access_key_id(self):
        return self.section.keys.get(ACCESS_KEY_ID)

    @property
    def secret_access_key(self):
        return self.section.keys.get(SECRET_ACCESS_KEY)

    def check(self):
        """
        :raises MissingCredentialError: if the profile lacks the
            access key id or the secret access key.
        """
        for key in (ACCESS_KEY_ID, SECRET_ACCESS_KEY):
            if not self.section.key_is_present(key):
                raise MissingCredentialError(f"profile {self.name} is missing {key}")

    def set_credentials(self, access_key_id, secret_access_key):
        self.section[ACCESS_KEY_ID] = access_key_id
        self.section[SECRET_ACCESS_KEY] = secret_access_key

    def export_lines(self):
        """
        :returns: The shell commands activating the profile,
            ie. eval "$(awscreds activate dev)".
        """
        self.check()
        return [
            f"export AWS_DEFAULT_PROFILE={shlex.quote(self.name)}",
            f"export AWS_ACCESS_KEY_ID={shlex.quote(self.access_key_id)}",
            f"export AWS_SECRET_ACCESS_KEY={shlex.quote(self.secret_access_key)}",
        ]

    def __repr__(self):
        return f"Profile({self.name!r})"


class Profiles:
    """
    The profiles of a loaded credentials file.
    """

    def __init__(self, document):
        self.document = document

    def names(self):
        return sorted(self.document.names())

    def get_profile(self, name):
        section = self.document.get(name)
        if section is None:
            raise ProfileNotFoundError(name)
        return Profile(section)

    def __iter__(self):
        for name in self.names():
            yield self.get_profile(name)
