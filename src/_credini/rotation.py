"""
Rotation replaces the access key of a profile by a newly created one,
using the AWS IAM api through boto3.
"""

import logging

import boto3
from botocore.exceptions import ClientError

from _credini.exceptions import KeyRotationError

logger = logging.getLogger(__name__)


def iam_client_for(profile):
    """
    :returns: An IAM client authenticated with the current
        key pair of the profile.
    """
    profile.check()
    session = boto3.Session(
        aws_access_key_id=profile.access_key_id,
        aws_secret_access_key=profile.secret_access_key,
    )
    return session.client("iam")


def rotate_access_key(profile, user, iam_client=None):
    """
    Create a new access key for user, store it in the profile and
    delete the key the profile held before.

    :param profile: The profile to rotate, must hold a key pair of user.
    :param user: The IAM user name owning the key.
    :param iam_client: The IAM client to use, defaults to one
        authenticated as the profile.
    :raises botocore.exceptions.ClientError: if the new key could not be
        created, the profile is then unchanged.
    :raises KeyRotationError: if the old key could not be deleted.
    :returns: The id of the new access key.
    """
    profile.check()
    if iam_client is None:
        iam_client = iam_client_for(profile)

    old_key_id = profile.access_key_id
    response = iam_client.create_access_key(UserName=user)
    access_key = response["AccessKey"]
    profile.set_credentials(access_key["AccessKeyId"], access_key["SecretAccessKey"])
    logger.info(
        "created access key %s for %s in profile %s",
        access_key["AccessKeyId"],
        user,
        profile.name,
    )

    try:
        iam_client.delete_access_key(UserName=user, AccessKeyId=old_key_id)
    except ClientError as err:
        logger.warning("could not delete access key %s: %s", old_key_id, err)
        raise KeyRotationError(
            f"created new key for profile {profile.name} "
            f"but could not delete old key {old_key_id}: {err}"
        ) from err
    logger.info("deleted access key %s", old_key_id)
    return access_key["AccessKeyId"]
