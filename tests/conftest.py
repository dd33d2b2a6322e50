import boto3
import pytest
from botocore.stub import Stubber

OLD_KEY_ID = "AKIAOLDOLDOLDOLDOLD1"
NEW_KEY_ID = "AKIANEWNEWNEWNEWNEW1"

CREDENTIALS = (
    "[default]\n"
    f"aws_access_key_id={OLD_KEY_ID}\n"
    "aws_secret_access_key=oldsecret\n"
    "\n"
    "[broken]\n"
    "region=eu-north-1\n"
    "\n"
    "[admin]\n"
    "aws_access_key_id = AKIAADMINADMINADMIN1\n"
    "aws_secret_access_key = adminsecret\n"
    "\n"
)


@pytest.fixture
def credentials_file(tmp_path):
    path = tmp_path / "credentials"
    path.write_text(CREDENTIALS)
    return path


@pytest.fixture
def iam_stub():
    client = boto3.client(
        "iam",
        region_name="us-east-1",
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
    )
    with Stubber(client) as stubber:
        yield client, stubber
        stubber.assert_no_pending_responses()


def new_key_response(user):
    return {
        "AccessKey": {
            "UserName": user,
            "AccessKeyId": NEW_KEY_ID,
            "Status": "Active",
            "SecretAccessKey": "newsecret",
        }
    }
