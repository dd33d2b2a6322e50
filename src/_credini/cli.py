"""
The awscreds command, easily manage AWS credentials files.
"""

import argparse
import logging
import sys

from botocore.exceptions import BotoCoreError, ClientError

from _credini.document import save
from _credini.exceptions import CredIniError
from _credini.profiles import Profiles, default_credentials_path
from _credini.reading import load
from _credini.rotation import rotate_access_key

logger = logging.getLogger(__name__)

LOG_LEVELS = [logging.WARNING, logging.INFO, logging.DEBUG]


def make_parser():
    parser = argparse.ArgumentParser(
        prog="awscreds", description="Easily manage AWS credentials files"
    )
    parser.add_argument(
        "-f",
        "--file",
        help="credentials file, defaults to $AWS_SHARED_CREDENTIALS_FILE "
        "or ~/.aws/credentials",
    )
    parser.add_argument(
        "-v", "--verbose", action="count", default=0, help="increase log output"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list", help="list profiles in AWS credentials file")

    activate_parser = subparsers.add_parser("activate", help="activate AWS profile")
    activate_parser.add_argument("profile", help="name of the profile")

    update_parser = subparsers.add_parser(
        "update", help="generate new AWS access/secret key pair for user in profile"
    )
    update_parser.add_argument(
        "-u", "--user", help="AWS user to create new key pair for"
    )
    update_parser.add_argument(
        "-p", "--profiles", help="comma-separated list of profiles to update"
    )
    return parser


def list_profiles(args, profiles):
    for name in profiles.names():
        print(name)


def activate(args, profiles):
    for line in profiles.get_profile(args.profile).export_lines():
        print(line)


def update(args, profiles):
    if not args.user:
        raise CredIniError("user not set")
    if not args.profiles:
        raise CredIniError("profiles not set")

    to_update = [profiles.get_profile(name) for name in args.profiles.split(",")]
    for profile in to_update:
        profile.check()

    for profile in to_update:
        print(f"Updating {profile.name}...", end="")
        try:
            rotate_access_key(profile, args.user)
        except (ClientError, BotoCoreError, CredIniError) as err:
            logger.debug("rotation of %s failed", profile.name, exc_info=True)
            print("SKIPPING")
            print(err)
        else:
            print("DONE")

    save(profiles.document)


COMMANDS = {
    "list": list_profiles,
    "activate": activate,
    "update": update,
}


def main(argv=None):
    args = make_parser().parse_args(argv)
    logging.basicConfig(
        level=LOG_LEVELS[min(args.verbose, len(LOG_LEVELS) - 1)],
        format="%(levelname)s:%(name)s:%(message)s",
    )

    path = args.file or default_credentials_path()
    try:
        profiles = Profiles(load(path))
        COMMANDS[args.command](args, profiles)
    except (CredIniError, OSError) as err:
        print(f"error: {err}", file=sys.stderr)
        return 1
    return 0
